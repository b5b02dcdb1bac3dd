"""
Base validation step.

This module provides the abstract base class for all validation steps,
establishing the single operation every step implements.
"""
from abc import ABC, abstractmethod
from typing import Optional
import logging

from pydantic import ValidationError

from askguard.core.error_handling import configuration_error_from
from askguard.models.outcome import ValidationOutcome

logger = logging.getLogger(__name__)


class ValidationStep(ABC):
    """Abstract base class for all validation steps.

    Each step implements one business rule:
    - Null guard
    - Whitespace cleaning
    - Length bounds
    - Punctuation/whitespace-only patterns
    - Repetition and spam patterns
    - Denylisted phrases and spam tokens
    - Letter ratio
    - Token budget

    Steps hold only configuration fixed at construction time and never know
    which pipeline they belong to, so one step instance can be shared by any
    number of pipelines and threads.
    """

    @abstractmethod
    def validate(self, text: Optional[str]) -> ValidationOutcome:
        """Validate text.

        Args:
            text: Text produced by the previous step (or the caller's input)

        Returns:
            ValidationOutcome accepting the (possibly transformed) text, or
            rejecting it with a reason. ``accept()`` without text passes the
            input on unchanged.
        """
        pass

    @property
    def name(self) -> str:
        """Step name used in logs."""
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{self.name}()"

    @staticmethod
    def _build_config(config_cls, component: str, **values):
        """Build a configuration model, converting pydantic errors.

        Raises:
            PipelineConfigurationError: If any value is invalid
        """
        try:
            return config_cls(**values)
        except ValidationError as e:
            raise configuration_error_from(e, component) from e
