"""
Service layer for agents - specialized business logic services.
"""

from .prompt_service import PromptService
from .validation_service import ValidationService
from .metrics_service import MetricsService
from .request_builder import ScriptRequestBuilder
from .generation_service import ScriptGenerationService
from .scheduler_service import SchedulerService

__all__ = [
    'PromptService',
    'ValidationService',
    'MetricsService',
    'ScriptRequestBuilder',
    'ScriptGenerationService',
    'SchedulerService'
]
