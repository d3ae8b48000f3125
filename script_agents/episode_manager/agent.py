"""
Episode Manager Agent - core business logic.
"""
from typing import List, Any, Optional

from episode_data.services import (
    EpisodeService, ScriptArchiveService, archive_service, episode_service
)

from ..common import BaseAgent, OpenAIManager
from ..services import ScriptGenerationService, SchedulerService
from .config import AGENT_INSTRUCTIONS
from .tools import EpisodeBrowserTool, SheetInsightsTool, SchedulerControlTool, HealthCheckTool


class EpisodeManagerAgent(BaseAgent):
    """Agent specialized in episode discovery and scheduled generation"""

    def __init__(
        self,
        openai_manager: Optional[OpenAIManager] = None,
        episodes: Optional[EpisodeService] = None,
        archive: Optional[ScriptArchiveService] = None,
        scheduler: Optional[SchedulerService] = None
    ):
        super().__init__(
            name="episode-manager",
            instructions=AGENT_INSTRUCTIONS,
            openai_manager=openai_manager
        )

        self.episode_service = episodes or episode_service
        self.archive_service = archive or archive_service
        self.scheduler = scheduler or SchedulerService(
            self.episode_service,
            ScriptGenerationService(self.openai, archive=self.archive_service)
        )

        # Initialize tools
        self.episode_browser_tool = EpisodeBrowserTool(self)
        self.sheet_insights_tool = SheetInsightsTool(self)
        self.scheduler_control_tool = SchedulerControlTool(self)
        self.health_check_tool = HealthCheckTool(self)

    def get_tools(self) -> List[Any]:
        """Return list of tools this agent provides"""
        return [
            self.episode_browser_tool,
            self.sheet_insights_tool,
            self.scheduler_control_tool,
            self.health_check_tool
        ]

    def run(self):
        """Start the agent server, and the scheduler when autostart is on"""
        if self.config["scheduler"]["autostart"]:
            self.scheduler.start()
        super().run()
