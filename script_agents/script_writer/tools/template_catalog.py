"""
Script template catalog tool.
"""
from typing import Dict, Any

from episode_data.schemas import EpisodeType

from ...common import AgentConfig
from ...services import MetricsService


class TemplateCatalogTool:
    """Tool for listing the episode templates"""

    def __init__(self, agent):
        self.agent = agent

    def register(self, server):
        """Register tool with FastMCP server"""
        @server.tool(
            name="get_script_templates",
            description="List the main and friday script templates with their sections and word targets",
        )
        def get_script_templates() -> Dict[str, Any]:
            return self.execute()

    def execute(self) -> Dict[str, Any]:
        templates = {}
        for episode_type in EpisodeType:
            template = AgentConfig.get_template(episode_type)
            templates[episode_type.value] = {
                "name": template["name"],
                "target_words": template["target_words"],
                "estimated_minutes": round(MetricsService.calculate_read_time(template["target_words"])),
                "sections": [dict(section) for section in template["sections"]]
            }

        return self.agent.create_success_response(
            data=templates,
            message="Script templates retrieved"
        )
