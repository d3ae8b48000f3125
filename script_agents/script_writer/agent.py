"""
Script Writer Agent - core business logic.
"""
from typing import List, Any, Optional

from episode_data.services import EpisodeService, ScriptArchiveService, archive_service, episode_service

from ..common import BaseAgent, OpenAIManager
from ..services import ScriptGenerationService
from .config import AGENT_INSTRUCTIONS
from .tools import (
    GenerateScriptTool, SheetScriptTool, BatchScriptTool, TemplateCatalogTool, ScriptArchiveTool
)


class ScriptWriterAgent(BaseAgent):
    """Agent specialized in podcast script writing and content creation"""

    def __init__(
        self,
        openai_manager: Optional[OpenAIManager] = None,
        episodes: Optional[EpisodeService] = None,
        archive: Optional[ScriptArchiveService] = None
    ):
        super().__init__(
            name="script-writer",
            instructions=AGENT_INSTRUCTIONS,
            openai_manager=openai_manager
        )

        self.episode_service = episodes or episode_service
        self.archive_service = archive or archive_service
        self.generation_service = ScriptGenerationService(self.openai, archive=self.archive_service)

        # Initialize tools
        self.generate_script_tool = GenerateScriptTool(self)
        self.sheet_script_tool = SheetScriptTool(self)
        self.batch_script_tool = BatchScriptTool(self)
        self.template_catalog_tool = TemplateCatalogTool(self)
        self.script_archive_tool = ScriptArchiveTool(self)

    def get_tools(self) -> List[Any]:
        """Return list of tools this agent provides"""
        return [
            self.generate_script_tool,
            self.sheet_script_tool,
            self.batch_script_tool,
            self.template_catalog_tool,
            self.script_archive_tool
        ]
