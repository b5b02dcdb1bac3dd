"""
Spam detection steps.

Two independent heuristics:
1. Repetition: a single character repeated beyond a configured tolerance,
   plus fixed spam patterns (a character repeated 4+ times, or a 1-3 letter
   unit repeated 6+ times, case-insensitive).
2. Denylist: exact matches against low-information phrases, and substring
   matches against spam tokens.

Both are literal pattern heuristics. The repetition tolerance and the fixed
spam pattern overlap on purpose and are evaluated separately.
"""
import re
import logging
from typing import Iterable, Optional

from askguard.core.constants import (
    REASON_EXCESSIVE_REPETITION,
    REASON_SPAM_PATTERN,
    REASON_USELESS_INPUT,
    REASON_SPAM_WORDS,
)
from askguard.models.outcome import ValidationOutcome
from askguard.models.step_config import RepetitionLimits, DenylistConfig
from .base_step import ValidationStep

logger = logging.getLogger(__name__)


class RepetitionSpamStep(ValidationStep):
    """Reject excessive character repetition and common spam patterns."""

    # Matched against lower-cased text
    SPAM_PATTERN = re.compile(r'(.)\1{3,}|([a-zA-Z]{1,3})\2{5,}')

    def __init__(self, max_repeated_chars: int):
        """
        Initialize repetition step.

        Args:
            max_repeated_chars: Reject when a character is followed by this
                many (or more) copies of itself

        Raises:
            PipelineConfigurationError: If max_repeated_chars is not positive
        """
        self._limits = self._build_config(
            RepetitionLimits, self.name, max_repeated_chars=max_repeated_chars
        )
        self._excessive_repetition = re.compile(
            r'(.)\1{%d,}' % self._limits.max_repeated_chars
        )

    @property
    def max_repeated_chars(self) -> int:
        return self._limits.max_repeated_chars

    def validate(self, text: str) -> ValidationOutcome:
        if self._excessive_repetition.search(text):
            return ValidationOutcome.reject(REASON_EXCESSIVE_REPETITION)

        if self.SPAM_PATTERN.search(text.lower()):
            return ValidationOutcome.reject(REASON_SPAM_PATTERN)

        return ValidationOutcome.accept(text)

    def __repr__(self) -> str:
        return f"{self.name}(max_repeated_chars={self.max_repeated_chars})"


class DenylistStep(ValidationStep):
    """Reject low-information phrases and text containing spam tokens."""

    def __init__(
        self,
        useless_phrases: Optional[Iterable[str]] = None,
        spam_tokens: Optional[Iterable[str]] = None
    ):
        """
        Initialize denylist step.

        Args:
            useless_phrases: Inputs rejected on exact match (case-insensitive, trimmed)
            spam_tokens: Inputs rejected when they contain any token (case-insensitive)

        Raises:
            PipelineConfigurationError: If either collection is malformed
        """
        self._denylist = self._build_config(
            DenylistConfig,
            self.name,
            useless_phrases=useless_phrases,
            spam_tokens=spam_tokens
        )

    @property
    def useless_phrases(self) -> frozenset:
        return self._denylist.useless_phrases

    @property
    def spam_tokens(self) -> frozenset:
        return self._denylist.spam_tokens

    def validate(self, text: str) -> ValidationOutcome:
        lowered = text.lower().strip()

        if lowered in self.useless_phrases:
            return ValidationOutcome.reject(REASON_USELESS_INPUT)

        if any(token in lowered for token in self.spam_tokens):
            return ValidationOutcome.reject(REASON_SPAM_WORDS)

        return ValidationOutcome.accept(text)

    def __repr__(self) -> str:
        return (
            f"{self.name}(useless_phrases={len(self.useless_phrases)}, "
            f"spam_tokens={len(self.spam_tokens)})"
        )
