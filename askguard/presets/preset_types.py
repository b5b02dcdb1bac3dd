"""
Preset type definitions for validation pipelines.

Replaces string-based preset identification with type-safe enum.
"""
from enum import Enum


class PipelinePreset(Enum):
    """Supported pipeline presets."""
    STRICT = "strict"
    LENIENT = "lenient"
    DEFAULT = "default"

    def __str__(self) -> str:
        """Return string value of the preset."""
        return self.value


# Preset display names for logging
PRESET_NAMES = {
    PipelinePreset.STRICT: "Strict (public-facing)",
    PipelinePreset.LENIENT: "Lenient (internal)",
    PipelinePreset.DEFAULT: "Default"
}
