"""Models for validation outcomes and step configuration."""

from .outcome import ValidationOutcome
from .step_config import (
    StepConfig,
    LengthBounds,
    RepetitionLimits,
    DenylistConfig,
    QualityThresholds,
    TokenBudget,
    PresetConfig
)

__all__ = [
    "ValidationOutcome",
    "StepConfig",
    "LengthBounds",
    "RepetitionLimits",
    "DenylistConfig",
    "QualityThresholds",
    "TokenBudget",
    "PresetConfig"
]
