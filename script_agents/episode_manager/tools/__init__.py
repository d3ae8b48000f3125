"""
Tools for episode manager agent.
"""

from .episode_browser import EpisodeBrowserTool
from .sheet_insights import SheetInsightsTool
from .scheduler_control import SchedulerControlTool
from .health_check import HealthCheckTool

__all__ = [
    'EpisodeBrowserTool',
    'SheetInsightsTool',
    'SchedulerControlTool',
    'HealthCheckTool'
]
