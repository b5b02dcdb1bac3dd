"""
Pipeline factory for building preset validation pipelines.

Centralizes preset construction and the process-wide default pipeline.
"""
import logging
from typing import Optional, Union

from askguard.models.step_config import PresetConfig
from askguard.presets import (
    PipelinePreset,
    PRESET_NAMES,
    get_preset_config,
    get_preset_for_context,
    resolve_preset,
)
from askguard.services.validation import PipelineBuilder, ValidationPipeline

logger = logging.getLogger(__name__)


class PipelineFactory:
    """Factory for creating preset and custom validation pipelines.

    Preset pipelines are built once per factory and reused: a pipeline is
    immutable, so sharing it is safe.
    """

    def __init__(self):
        """Initialize the pipeline factory."""
        self._pipelines: dict = {}

    def strict(self) -> ValidationPipeline:
        """Tight bounds and extended denylist for public-facing callers."""
        return self.for_preset(PipelinePreset.STRICT)

    def lenient(self) -> ValidationPipeline:
        """Wide bounds and minimal denylist for internal callers."""
        return self.for_preset(PipelinePreset.LENIENT)

    def default(self) -> ValidationPipeline:
        """Configuration between strict and lenient."""
        return self.for_preset(PipelinePreset.DEFAULT)

    def for_preset(self, preset: Union[PipelinePreset, str, None] = None) -> ValidationPipeline:
        """
        Get or create the pipeline for a preset.

        Args:
            preset: Preset enum or name; None uses settings.VALIDATION_PRESET

        Returns:
            ValidationPipeline for the preset

        Raises:
            PipelineConfigurationError: If preset is not an enum, name or None
        """
        resolved = resolve_preset(preset)
        if resolved not in self._pipelines:
            self._pipelines[resolved] = build_preset_pipeline(get_preset_config(resolved))
            logger.info(f"{PRESET_NAMES[resolved]} validation pipeline initialized")
        return self._pipelines[resolved]

    def for_context(self, context: Optional[str]) -> ValidationPipeline:
        """
        Get the pipeline for a deployment context (e.g. "public", "internal").

        Args:
            context: Deployment context; mapped through settings.CONTEXT_PRESET_MAPPING

        Returns:
            ValidationPipeline for the mapped preset
        """
        return self.for_preset(get_preset_for_context(context))

    @staticmethod
    def builder() -> PipelineBuilder:
        """Start a custom pipeline."""
        return PipelineBuilder()


def build_preset_pipeline(config: PresetConfig) -> ValidationPipeline:
    """
    Build the standard step sequence from a preset configuration.

    Order: null guard -> cleaner -> length -> content pattern -> spam ->
    denylist -> quality -> token budget.

    Args:
        config: Preset configuration snapshot

    Returns:
        ValidationPipeline named after the preset
    """
    return (
        PipelineBuilder()
        .add_null_guard()
        .add_cleaner()
        .add_length_bounds(config.length.min_length, config.length.max_length)
        .add_content_pattern()
        .add_spam_detection(config.repetition.max_repeated_chars)
        .add_denylist(config.denylist.useless_phrases, config.denylist.spam_tokens)
        .add_content_quality(config.quality.min_letter_ratio)
        .add_token_budget(config.tokens.max_tokens)
        .build(name=config.name)
    )


# Global singleton instance
_pipeline_factory: Optional[PipelineFactory] = None


def get_pipeline_factory() -> PipelineFactory:
    """
    Get the global pipeline factory instance.

    Returns:
        Singleton PipelineFactory instance
    """
    global _pipeline_factory
    if _pipeline_factory is None:
        _pipeline_factory = PipelineFactory()
    return _pipeline_factory


def get_pipeline(preset: Union[PipelinePreset, str, None] = None) -> ValidationPipeline:
    """Get a preset pipeline from the global factory (settings.VALIDATION_PRESET by default)."""
    return get_pipeline_factory().for_preset(preset)


def strict() -> ValidationPipeline:
    """Strict preset pipeline."""
    return get_pipeline_factory().strict()


def lenient() -> ValidationPipeline:
    """Lenient preset pipeline."""
    return get_pipeline_factory().lenient()


def default() -> ValidationPipeline:
    """Default preset pipeline."""
    return get_pipeline_factory().default()


def builder() -> PipelineBuilder:
    """Start a custom pipeline."""
    return PipelineBuilder()
