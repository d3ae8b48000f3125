"""
Common utilities and base classes for all agents.
"""

from .base_agent import BaseAgent
from .openai_client import OpenAIManager
from .script_parser import ScriptParser
from .config import AgentConfig
from .logging_utils import configure_logging
from .exceptions import (
    AgentError, OpenAIError, RateLimitError, ValidationError, NotFoundError, SheetsError
)

__all__ = [
    'BaseAgent',
    'OpenAIManager',
    'ScriptParser',
    'AgentConfig',
    'configure_logging',
    'AgentError',
    'OpenAIError',
    'RateLimitError',
    'ValidationError',
    'NotFoundError',
    'SheetsError'
]
