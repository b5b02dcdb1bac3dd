"""
Content quality steps: letter density and token budget.
"""
import re
import logging

from askguard.core.constants import (
    REASON_NO_VALID_LETTERS,
    REASON_LOW_LETTER_RATIO,
    REASON_TOO_MANY_TOKENS_TEMPLATE,
    CHARS_PER_TOKEN,
)
from askguard.models.outcome import ValidationOutcome
from askguard.models.step_config import QualityThresholds, TokenBudget
from .base_step import ValidationStep

logger = logging.getLogger(__name__)


class ContentQualityStep(ValidationStep):
    """Reject text without Latin letters or with too few letters overall."""

    # ASCII letters plus accented Latin letters (Latin-1 Supplement and Latin Extended-A)
    LATIN_LETTER = re.compile(r'[a-zA-ZÀ-ÖØ-öø-ÿĀ-ſ]')

    def __init__(self, min_letter_ratio: float):
        """
        Initialize quality step.

        Args:
            min_letter_ratio: Minimum ratio of alphabetic characters to total
                length, between 0 and 1

        Raises:
            PipelineConfigurationError: If the ratio is outside [0, 1]
        """
        self._thresholds = self._build_config(
            QualityThresholds, self.name, min_letter_ratio=min_letter_ratio
        )

    @property
    def min_letter_ratio(self) -> float:
        return self._thresholds.min_letter_ratio

    @staticmethod
    def letter_ratio(text: str) -> float:
        """Ratio of alphabetic characters to total length (0.0 for empty text)."""
        if not text:
            return 0.0
        return sum(1 for c in text if c.isalpha()) / len(text)

    def validate(self, text: str) -> ValidationOutcome:
        if not self.LATIN_LETTER.search(text):
            return ValidationOutcome.reject(REASON_NO_VALID_LETTERS)

        ratio = self.letter_ratio(text)
        if ratio < self.min_letter_ratio:
            logger.debug(f"Letter ratio {ratio:.1%} below {self.min_letter_ratio:.1%}")
            return ValidationOutcome.reject(REASON_LOW_LETTER_RATIO)

        return ValidationOutcome.accept(text)

    def __repr__(self) -> str:
        return f"{self.name}(min_letter_ratio={self.min_letter_ratio})"


class TokenBudgetStep(ValidationStep):
    """Reject text whose estimated token count exceeds a budget."""

    def __init__(self, max_tokens: int):
        """
        Initialize token budget step.

        Args:
            max_tokens: Maximum estimated tokens

        Raises:
            PipelineConfigurationError: If max_tokens is not positive
        """
        self._budget = self._build_config(TokenBudget, self.name, max_tokens=max_tokens)

    @property
    def max_tokens(self) -> int:
        return self._budget.max_tokens

    @staticmethod
    def estimate_tokens(text: str) -> int:
        """Rough token estimate: one token per four characters, never below one."""
        return max(1, len(text) // CHARS_PER_TOKEN)

    def validate(self, text: str) -> ValidationOutcome:
        estimated_tokens = self.estimate_tokens(text)

        if estimated_tokens > self.max_tokens:
            return ValidationOutcome.reject(
                REASON_TOO_MANY_TOKENS_TEMPLATE.format(estimated_tokens=estimated_tokens)
            )

        return ValidationOutcome.accept(text)

    def __repr__(self) -> str:
        return f"{self.name}(max_tokens={self.max_tokens})"
