"""
Preset routing logic for validation pipelines.

Determines which preset to use based on the deployment context of a caller.
"""
import logging
from typing import Optional, Union

from askguard.core.config import settings
from askguard.core.error_handling import PipelineConfigurationError
from .preset_types import PipelinePreset

logger = logging.getLogger(__name__)


def get_preset_for_context(context: Optional[str]) -> PipelinePreset:
    """
    Determine which preset to use based on deployment context.

    Uses the CONTEXT_PRESET_MAPPING from config to map contexts to presets.

    Args:
        context: Deployment context string, e.g. "public" (can be None or empty)

    Returns:
        PipelinePreset enum value for the context
    """
    if not context or not context.strip():
        default_preset_str = settings.CONTEXT_PRESET_MAPPING.get("default", "default")
        return string_to_preset(default_preset_str)

    context_lower = context.lower().strip()

    for pattern, preset_str in settings.CONTEXT_PRESET_MAPPING.items():
        if pattern == "default":
            continue
        if pattern.lower() == context_lower:
            preset = string_to_preset(preset_str)
            logger.debug(f"Context '{context}' matched '{pattern}' -> preset: {preset}")
            return preset

    default_preset_str = settings.CONTEXT_PRESET_MAPPING.get("default", "default")
    preset = string_to_preset(default_preset_str)
    logger.info(f"Context '{context}' using default preset: {preset}")
    return preset


def resolve_preset(preset: Union[PipelinePreset, str, None]) -> PipelinePreset:
    """
    Resolve a preset given as enum, string, or None.

    None resolves to settings.VALIDATION_PRESET.

    Args:
        preset: Preset enum, preset name, or None

    Returns:
        PipelinePreset enum value

    Raises:
        PipelineConfigurationError: If preset is neither an enum, a string nor None
    """
    if preset is None:
        return string_to_preset(settings.VALIDATION_PRESET)
    if isinstance(preset, PipelinePreset):
        return preset
    if not isinstance(preset, str):
        raise PipelineConfigurationError(
            f"Preset must be a PipelinePreset or preset name (got {type(preset).__name__})"
        )
    return string_to_preset(preset)


def string_to_preset(preset_str: str) -> PipelinePreset:
    """
    Convert string preset identifier to PipelinePreset enum.

    Args:
        preset_str: String preset identifier (e.g., "strict", "lenient")

    Returns:
        Corresponding PipelinePreset enum value, or DEFAULT if unrecognized
    """
    preset_map = {
        "strict": PipelinePreset.STRICT,
        "lenient": PipelinePreset.LENIENT,
        "default": PipelinePreset.DEFAULT,
    }

    preset = preset_map.get(preset_str.lower().strip())
    if preset is None:
        logger.warning(f"Unknown preset string '{preset_str}', defaulting to DEFAULT")
        return PipelinePreset.DEFAULT

    return preset
