"""
Custom exceptions for agent operations.
"""
from typing import List, Optional

from episode_data.exceptions import (
    ServiceError, NotFoundError, UpstreamUnavailableError, SheetsError
)

class AgentError(ServiceError):
    """Base exception for all agent-related errors"""
    pass

class OpenAIError(UpstreamUnavailableError):
    """Raised when OpenAI API operations fail"""
    pass

class RateLimitError(OpenAIError):
    """Raised when the OpenAI API rejects a call with 429"""
    status_code = 429

class AuthenticationError(OpenAIError):
    """Raised when the OpenAI API rejects the API key"""
    pass

class UpstreamServerError(OpenAIError):
    """Raised when the OpenAI API answers with a 5xx status"""
    pass

class PromptTemplateError(AgentError):
    """Raised when prompt template operations fail"""
    pass

class ValidationError(AgentError):
    """Raised when input validation fails"""
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[List[str]] = None):
        super().__init__(message)
        self.field = field
        self.details = details or [message]

__all__ = [
    'ServiceError',
    'NotFoundError',
    'UpstreamUnavailableError',
    'SheetsError',
    'AgentError',
    'OpenAIError',
    'RateLimitError',
    'AuthenticationError',
    'UpstreamServerError',
    'PromptTemplateError',
    'ValidationError'
]
