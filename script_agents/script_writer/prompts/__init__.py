"""
Prompt templates for script writer agent.
"""

from .system import HOST_SYSTEM_PROMPT, EPISODE_FOCUS
from .episode import EPISODE_SCRIPT_PROMPT, EPISODE_REQUIREMENTS
from .seo import (
    SEO_TITLE_SYSTEM, SEO_TITLE_PROMPT, SEO_TAGS_SYSTEM, SEO_TAGS_PROMPT,
    DESCRIPTION_SYSTEM, DESCRIPTION_PROMPT
)

__all__ = [
    'HOST_SYSTEM_PROMPT',
    'EPISODE_FOCUS',
    'EPISODE_SCRIPT_PROMPT',
    'EPISODE_REQUIREMENTS',
    'SEO_TITLE_SYSTEM',
    'SEO_TITLE_PROMPT',
    'SEO_TAGS_SYSTEM',
    'SEO_TAGS_PROMPT',
    'DESCRIPTION_SYSTEM',
    'DESCRIPTION_PROMPT'
]
