"""
askguard - input validation pipeline for free-text questions.

Runs user text through an ordered series of checks and returns either the
cleaned text or a human-readable rejection reason:
  null guard -> cleaner -> length -> pattern -> spam -> denylist -> quality -> tokens
"""
from askguard.core.error_handling import (
    AskGuardError,
    PipelineConfigurationError,
    InputRejectedError,
)
from askguard.models.outcome import ValidationOutcome
from askguard.presets import PipelinePreset
from askguard.services.validation import ValidationStep, ValidationPipeline, PipelineBuilder
from askguard.services.pipeline_factory import (
    PipelineFactory,
    get_pipeline_factory,
    get_pipeline,
    strict,
    lenient,
    default,
    builder,
)

__version__ = "1.0.0"

__all__ = [
    "AskGuardError",
    "PipelineConfigurationError",
    "InputRejectedError",
    "ValidationOutcome",
    "PipelinePreset",
    "ValidationStep",
    "ValidationPipeline",
    "PipelineBuilder",
    "PipelineFactory",
    "get_pipeline_factory",
    "get_pipeline",
    "strict",
    "lenient",
    "default",
    "builder",
]
