"""
Outcome model for text validation.

This module provides the immutable result value produced by every validation
step and returned by a pipeline.
"""
from dataclasses import dataclass
from typing import Optional

from askguard.core.error_handling import InputRejectedError


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating a piece of text.

    Exactly one of ``reason`` / ``cleaned_text`` is set, depending on
    ``accepted``. Build instances through ``accept()`` and ``reject()``.

    A step that accepts without rewriting its input may call ``accept()``
    with no text. Such an outcome is marked ``unchanged`` and the pipeline
    replaces it with the text it forwarded to that step, so a pipeline never
    returns an accepted outcome without cleaned text.
    """

    accepted: bool
    """Whether the text passed validation."""

    reason: Optional[str] = None
    """Human-readable rejection reason (rejected outcomes only)."""

    cleaned_text: Optional[str] = None
    """Text after cleaning (accepted outcomes only)."""

    unchanged: bool = False
    """Accepted without producing text; the input is passed on as-is."""

    def __post_init__(self):
        """Validate the accepted/reason/cleaned_text invariant."""
        if self.accepted and self.reason is not None:
            raise ValueError("Accepted outcome cannot carry a rejection reason")
        if not self.accepted and self.cleaned_text is not None:
            raise ValueError("Rejected outcome cannot carry cleaned text")
        if not self.accepted and self.reason is None:
            raise ValueError("Rejected outcome requires a reason")
        if self.unchanged and (not self.accepted or self.cleaned_text is not None):
            raise ValueError("Only an accepted outcome without text can be unchanged")
        if self.accepted and self.cleaned_text is None and not self.unchanged:
            raise ValueError("Accepted outcome requires cleaned text")

    @classmethod
    def accept(cls, text: Optional[str] = None) -> "ValidationOutcome":
        """Create an accepted outcome carrying the (possibly cleaned) text."""
        if text is None:
            return cls(accepted=True, unchanged=True)
        return cls(accepted=True, cleaned_text=text)

    @classmethod
    def reject(cls, reason: str) -> "ValidationOutcome":
        """Create a rejected outcome carrying the reason."""
        return cls(accepted=False, reason=reason)

    @property
    def is_valid(self) -> bool:
        """Alias for ``accepted``."""
        return self.accepted

    def raise_if_rejected(self) -> Optional[str]:
        """
        Return the cleaned text, or raise if the outcome is a rejection.

        Returns:
            Cleaned text of an accepted outcome (None for an unchanged one)

        Raises:
            InputRejectedError: If the outcome is a rejection
        """
        if not self.accepted:
            raise InputRejectedError(self.reason)
        return self.cleaned_text
