"""
Steps that check the overall shape of the text: its length and whether it
carries anything besides whitespace and punctuation.
"""
import string
import unicodedata
import logging

from askguard.core.constants import (
    REASON_TOO_SHORT_TEMPLATE,
    REASON_TOO_LONG_TEMPLATE,
    REASON_ONLY_SPACES,
    REASON_ONLY_PUNCTUATION,
)
from askguard.models.outcome import ValidationOutcome
from askguard.models.step_config import LengthBounds
from .base_step import ValidationStep

logger = logging.getLogger(__name__)


class LengthStep(ValidationStep):
    """Reject text outside an inclusive character-count range."""

    def __init__(self, min_length: int, max_length: int):
        """
        Initialize length step.

        Args:
            min_length: Minimum number of characters (inclusive)
            max_length: Maximum number of characters (inclusive)

        Raises:
            PipelineConfigurationError: If the bounds are invalid
        """
        self._bounds = self._build_config(
            LengthBounds, self.name, min_length=min_length, max_length=max_length
        )

    @property
    def min_length(self) -> int:
        return self._bounds.min_length

    @property
    def max_length(self) -> int:
        return self._bounds.max_length

    def validate(self, text: str) -> ValidationOutcome:
        length = len(text)

        if length < self.min_length:
            return ValidationOutcome.reject(
                REASON_TOO_SHORT_TEMPLATE.format(min_length=self.min_length)
            )

        if length > self.max_length:
            return ValidationOutcome.reject(
                REASON_TOO_LONG_TEMPLATE.format(max_length=self.max_length)
            )

        return ValidationOutcome.accept(text)

    def __repr__(self) -> str:
        return f"{self.name}(min_length={self.min_length}, max_length={self.max_length})"


class ContentPatternStep(ValidationStep):
    """Reject text made only of whitespace, or only of punctuation and whitespace."""

    ASCII_PUNCTUATION = frozenset(string.punctuation)

    def _is_punctuation(self, char: str) -> bool:
        """ASCII punctuation, or any character in a Unicode punctuation category."""
        return char in self.ASCII_PUNCTUATION or unicodedata.category(char).startswith('P')

    def validate(self, text: str) -> ValidationOutcome:
        if not text or text.isspace():
            return ValidationOutcome.reject(REASON_ONLY_SPACES)

        if all(c.isspace() or self._is_punctuation(c) for c in text):
            return ValidationOutcome.reject(REASON_ONLY_PUNCTUATION)

        return ValidationOutcome.accept(text)
