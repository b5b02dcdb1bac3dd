"""
Validation pipeline executor.

Threads text through an ordered, immutable sequence of validation steps,
stopping at the first rejection.
"""
import logging
from typing import Iterable, Optional, Tuple

from askguard.core.config import settings
from askguard.core.constants import CUSTOM_PIPELINE_NAME, REASON_NULL_INPUT
from askguard.core.error_handling import PipelineConfigurationError
from askguard.models.outcome import ValidationOutcome
from .base_step import ValidationStep
from .normalization_steps import NullGuardStep

logger = logging.getLogger(__name__)


class ValidationPipeline:
    """Ordered sequence of validation steps.

    Usage:
        pipeline = ValidationPipeline([NullGuardStep(), WhitespaceCleanerStep()])
        outcome = pipeline.validate("  some   text ")
        if outcome.accepted:
            forward(outcome.cleaned_text)

    The step sequence is frozen at construction. A pipeline holds no state
    between calls and can be shared freely across threads.
    """

    def __init__(self, steps: Iterable[ValidationStep], name: str = CUSTOM_PIPELINE_NAME):
        """
        Initialize the pipeline.

        Args:
            steps: Steps in execution order (at least one)
            name: Pipeline name used in logs

        Raises:
            PipelineConfigurationError: If no steps are given or an entry is not a step
        """
        steps = tuple(steps)
        if not steps:
            raise PipelineConfigurationError("At least one validation step must be added")

        for step in steps:
            if not isinstance(step, ValidationStep):
                raise PipelineConfigurationError(
                    f"Pipeline entries must be ValidationStep instances (got {type(step).__name__})"
                )

        self._steps: Tuple[ValidationStep, ...] = steps
        self._name = name

    @property
    def steps(self) -> Tuple[ValidationStep, ...]:
        """Steps in execution order."""
        return self._steps

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"ValidationPipeline(name={self._name!r}, steps={list(self._steps)!r})"

    def validate(self, text: Optional[str]) -> ValidationOutcome:
        """
        Run text through every step in order.

        Each step receives the text accepted by the previous step, or the
        same text again when that step accepted it unchanged. The first
        rejection is returned immediately and later steps never run. If all
        steps accept, the last step's outcome is returned with the final
        text filled in.

        ``None`` input is only ever handed to a ``NullGuardStep``. When any
        other step would receive it, the pipeline rejects the input as null
        on that step's behalf.

        Args:
            text: Raw user input

        Returns:
            ValidationOutcome with the cleaned text or the rejection reason
        """
        current = text
        outcome = None

        for step in self._steps:
            if current is None and not isinstance(step, NullGuardStep):
                outcome = ValidationOutcome.reject(REASON_NULL_INPUT)
            else:
                outcome = step.validate(current)

            if not outcome.accepted:
                self._log_rejection(step, outcome, text)
                return outcome

            if outcome.cleaned_text is not None:
                current = outcome.cleaned_text

        if outcome.unchanged:
            return ValidationOutcome.accept(current)
        return outcome

    def is_valid(self, text: Optional[str]) -> bool:
        """Quick check: True if the text passes every step."""
        return self.validate(text).accepted

    def cleaned_or_none(self, text: Optional[str]) -> Optional[str]:
        """Return the cleaned text if valid, otherwise None."""
        outcome = self.validate(text)
        return outcome.cleaned_text if outcome.accepted else None

    def _log_rejection(
        self,
        step: ValidationStep,
        outcome: ValidationOutcome,
        original_text: Optional[str]
    ):
        """Log which step rejected the input."""
        if not logger.isEnabledFor(logging.DEBUG):
            return

        fields = {"pipeline": self._name, "step": step.name, "reason": outcome.reason}
        message = f"[{self._name}] {step.name} rejected input: {outcome.reason}"
        if settings.LOG_REJECTED_INPUT and original_text is not None:
            preview = original_text[:settings.REJECTED_INPUT_LOG_CHARS]
            fields["input_preview"] = preview
            message += f" (input={preview!r})"
        logger.debug(message, extra={"extra_fields": fields})
