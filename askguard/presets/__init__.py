"""
Preset management module for validation pipelines.

This module provides type-safe preset definitions, their configuration and
routing logic.
"""
from .preset_types import PipelinePreset, PRESET_NAMES
from .preset_configs import get_preset_config
from .preset_router import (
    get_preset_for_context,
    resolve_preset,
    string_to_preset
)

__all__ = [
    "PipelinePreset",
    "PRESET_NAMES",
    "get_preset_config",
    "get_preset_for_context",
    "resolve_preset",
    "string_to_preset",
]
