"""
Error types for the validation pipeline.

Rejected input is never an error inside the pipeline: it travels as data in a
ValidationOutcome. The exceptions here cover misconfiguration, plus an opt-in
exception for callers that want to turn a rejection into control flow.
"""
import logging

from pydantic import ValidationError

logger = logging.getLogger(__name__)


# ============================================================================
# Custom Exceptions
# ============================================================================

class AskGuardError(Exception):
    """Base exception for validation pipeline errors."""
    pass


class PipelineConfigurationError(AskGuardError):
    """Pipeline or step was configured with invalid parameters."""
    pass


class InputRejectedError(AskGuardError):
    """Input was rejected by a validation pipeline.

    Raised only by ValidationOutcome.raise_if_rejected(), for callers that
    map rejections onto a client error response.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


# ============================================================================
# Helpers
# ============================================================================

def configuration_error_from(error: ValidationError, component: str) -> PipelineConfigurationError:
    """
    Convert a pydantic ValidationError raised by a configuration model into
    a PipelineConfigurationError with a readable message.

    Args:
        error: The pydantic validation error
        component: Name of the step or preset being configured

    Returns:
        PipelineConfigurationError describing every failing field
    """
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
        for err in error.errors()
    )
    logger.error(f"Invalid configuration for {component}: {details}")
    return PipelineConfigurationError(f"Invalid configuration for {component}: {details}")
