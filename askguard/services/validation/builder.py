"""
Builder for custom validation pipelines.
"""
import logging
from typing import Iterable, List, Optional

from askguard.core.constants import CUSTOM_PIPELINE_NAME
from askguard.core.error_handling import PipelineConfigurationError
from .base_step import ValidationStep
from .normalization_steps import NullGuardStep, WhitespaceCleanerStep
from .structure_steps import LengthStep, ContentPatternStep
from .spam_steps import RepetitionSpamStep, DenylistStep
from .quality_steps import ContentQualityStep, TokenBudgetStep
from .pipeline import ValidationPipeline

logger = logging.getLogger(__name__)


class PipelineBuilder:
    """Accumulates validation steps and freezes them into a pipeline.

    Usage:
        pipeline = (
            PipelineBuilder()
            .add_null_guard()
            .add_cleaner()
            .add_length_bounds(5, 1000)
            .build()
        )

    Every add_* method validates its parameters immediately, so a bad
    threshold fails here rather than on the first request.
    """

    def __init__(self):
        """Initialize an empty builder."""
        self._steps: List[ValidationStep] = []

    def add_null_guard(self) -> "PipelineBuilder":
        """Reject absent (None) input."""
        return self._add(NullGuardStep())

    def add_cleaner(self) -> "PipelineBuilder":
        """Trim and collapse whitespace; reject text that is empty afterwards."""
        return self._add(WhitespaceCleanerStep())

    def add_length_bounds(self, min_length: int, max_length: int) -> "PipelineBuilder":
        """Reject text shorter than min_length or longer than max_length characters."""
        return self._add(LengthStep(min_length, max_length))

    def add_content_pattern(self) -> "PipelineBuilder":
        """Reject whitespace-only and punctuation-only text."""
        return self._add(ContentPatternStep())

    def add_spam_detection(self, max_repeated_chars: int) -> "PipelineBuilder":
        """Reject excessive character repetition and common spam patterns."""
        return self._add(RepetitionSpamStep(max_repeated_chars))

    def add_denylist(
        self,
        useless_phrases: Optional[Iterable[str]] = None,
        spam_tokens: Optional[Iterable[str]] = None
    ) -> "PipelineBuilder":
        """Reject low-information phrases and text containing spam tokens."""
        return self._add(DenylistStep(useless_phrases, spam_tokens))

    def add_content_quality(self, min_letter_ratio: float) -> "PipelineBuilder":
        """Reject text without letters or with a letter ratio below min_letter_ratio."""
        return self._add(ContentQualityStep(min_letter_ratio))

    def add_token_budget(self, max_tokens: int) -> "PipelineBuilder":
        """Reject text whose estimated token count exceeds max_tokens."""
        return self._add(TokenBudgetStep(max_tokens))

    def add_custom_step(self, step: ValidationStep) -> "PipelineBuilder":
        """Append any ValidationStep implementation."""
        if not isinstance(step, ValidationStep):
            raise PipelineConfigurationError(
                f"Custom steps must be ValidationStep instances (got {type(step).__name__})"
            )
        return self._add(step)

    def build(self, name: str = CUSTOM_PIPELINE_NAME) -> ValidationPipeline:
        """
        Freeze the accumulated steps into a pipeline.

        Args:
            name: Pipeline name used in logs

        Returns:
            Immutable ValidationPipeline

        Raises:
            PipelineConfigurationError: If no steps were added
        """
        if not self._steps:
            raise PipelineConfigurationError("At least one validation step must be added")

        pipeline = ValidationPipeline(self._steps, name=name)
        logger.debug(f"Built pipeline '{name}' with {len(pipeline)} steps")
        return pipeline

    def _add(self, step: ValidationStep) -> "PipelineBuilder":
        self._steps.append(step)
        return self
