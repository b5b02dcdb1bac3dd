"""
Pydantic models for validation step configuration.

Every configurable step validates its parameters through one of these frozen
models, so a misconfigured step fails when it is built rather than when it
first sees user input.
"""
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class StepConfig(BaseModel):
    """Base class for immutable step configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class LengthBounds(StepConfig):
    """Inclusive character-count bounds."""

    min_length: int = Field(..., ge=0, description="Minimum number of characters (inclusive)")
    max_length: int = Field(..., ge=1, description="Maximum number of characters (inclusive)")

    @model_validator(mode="after")
    def validate_bounds(self) -> "LengthBounds":
        """Validate min_length does not exceed max_length."""
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})"
            )
        return self


class RepetitionLimits(StepConfig):
    """Tolerance for consecutive repeated characters."""

    max_repeated_chars: int = Field(
        ...,
        ge=1,
        description="Reject when a character is followed by this many copies of itself"
    )


class DenylistConfig(StepConfig):
    """Low-information phrases and spam tokens."""

    useless_phrases: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Inputs rejected on exact (case-insensitive, trimmed) match"
    )
    spam_tokens: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Inputs rejected when they contain any of these (case-insensitive)"
    )

    @field_validator("useless_phrases", "spam_tokens", mode="before")
    @classmethod
    def normalize_entries(cls, v):
        """Lower-case and trim entries, dropping empty ones."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            raise ValueError("must be a collection of strings, not a single string")
        normalized = set()
        for entry in v:
            if not isinstance(entry, str):
                raise ValueError(f"entries must be strings (got {type(entry).__name__})")
            entry = entry.strip().lower()
            if entry:
                normalized.add(entry)
        return frozenset(normalized)


class QualityThresholds(StepConfig):
    """Minimum share of alphabetic characters."""

    min_letter_ratio: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Minimum ratio of alphabetic characters to total length"
    )


class TokenBudget(StepConfig):
    """Maximum estimated token count."""

    max_tokens: int = Field(..., ge=1, description="Maximum estimated tokens")


class PresetConfig(StepConfig):
    """Complete configuration of a named pipeline preset."""

    name: str
    length: LengthBounds
    repetition: RepetitionLimits
    denylist: DenylistConfig
    quality: QualityThresholds
    tokens: TokenBudget
