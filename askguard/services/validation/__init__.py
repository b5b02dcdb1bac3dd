"""
Validation pipeline package for user text.

Split into focused modules:
- base_step.py: ValidationStep abstraction
- normalization_steps.py: null guard and whitespace cleaning
- structure_steps.py: length bounds and whitespace/punctuation-only patterns
- spam_steps.py: repetition patterns and denylists
- quality_steps.py: letter ratio and token budget
- pipeline.py: ValidationPipeline executor
- builder.py: PipelineBuilder for custom pipelines
"""
from .base_step import ValidationStep
from .normalization_steps import NullGuardStep, WhitespaceCleanerStep
from .structure_steps import LengthStep, ContentPatternStep
from .spam_steps import RepetitionSpamStep, DenylistStep
from .quality_steps import ContentQualityStep, TokenBudgetStep
from .pipeline import ValidationPipeline
from .builder import PipelineBuilder

__all__ = [
    'ValidationStep',
    'NullGuardStep',
    'WhitespaceCleanerStep',
    'LengthStep',
    'ContentPatternStep',
    'RepetitionSpamStep',
    'DenylistStep',
    'ContentQualityStep',
    'TokenBudgetStep',
    'ValidationPipeline',
    'PipelineBuilder',
]
