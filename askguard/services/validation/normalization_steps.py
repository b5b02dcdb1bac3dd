"""
Steps that guard against missing input and normalize whitespace.
"""
import re
import logging
from typing import Optional

from askguard.core.constants import REASON_NULL_INPUT, REASON_EMPTY_AFTER_CLEANING
from askguard.models.outcome import ValidationOutcome
from .base_step import ValidationStep

logger = logging.getLogger(__name__)


class NullGuardStep(ValidationStep):
    """Reject absent input."""

    def validate(self, text: Optional[str]) -> ValidationOutcome:
        if text is None:
            return ValidationOutcome.reject(REASON_NULL_INPUT)
        return ValidationOutcome.accept(text)


class WhitespaceCleanerStep(ValidationStep):
    """Trim text and collapse whitespace runs into a single space."""

    # Any whitespace run, line breaks included
    WHITESPACE_RUN = re.compile(r'\s+')

    def clean(self, text: str) -> str:
        """
        Normalize whitespace in text.

        Leading and trailing whitespace is removed, and every run of
        whitespace (spaces, tabs, line breaks) becomes a single space.
        Cleaning is idempotent.

        Args:
            text: Text to clean

        Returns:
            Cleaned text
        """
        return self.WHITESPACE_RUN.sub(' ', text.strip())

    def validate(self, text: str) -> ValidationOutcome:
        cleaned = self.clean(text)

        if not cleaned:
            return ValidationOutcome.reject(REASON_EMPTY_AFTER_CLEANING)

        return ValidationOutcome.accept(cleaned)
