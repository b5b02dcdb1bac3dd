"""Services package for text validation pipelines and their factory."""

from askguard.services.validation import ValidationPipeline, PipelineBuilder, ValidationStep
from askguard.services.pipeline_factory import PipelineFactory, get_pipeline_factory, get_pipeline

__all__ = [
    'ValidationPipeline',
    'PipelineBuilder',
    'ValidationStep',
    'PipelineFactory',
    'get_pipeline_factory',
    'get_pipeline',
]
