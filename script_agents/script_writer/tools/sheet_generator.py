"""
Spreadsheet-driven script generation tool.
"""
from typing import Dict, Any

from episode_data.episode_selector import determine_episode_type

from ...services import ValidationService, MetricsService
from .script_generator import content_payload


class SheetScriptTool:
    """Tool for drafting a script for an episode looked up in the sheet"""

    def __init__(self, agent):
        self.agent = agent

    def register(self, server):
        """Register tool with FastMCP server"""
        @server.tool(
            name="generate_script_from_sheet",
            description="Look up an episode in the Google Sheet by topic or title and generate its script, SEO and description",
        )
        def generate_script_from_sheet(topic: str) -> Dict[str, Any]:
            return self.execute(topic)

    def execute(self, topic: str) -> Dict[str, Any]:
        try:
            topic = ValidationService.validate_topic(topic)

            episode = self.agent.episode_service.get_by_topic(topic)
            episode_type = determine_episode_type(episode)

            content = self.agent.generation_service.generate_content(episode, episode_type, source="sheet")

            self.agent.log_event(
                event_type="sheet_script_generated",
                message=f"Generated {episode_type.value} episode script from sheet row {episode.row_index}",
                topic=episode.topic,
                payload=MetricsService.script_metrics(content.script)
            )

            return self.agent.create_success_response(
                data=content_payload(content),
                message="Script generated from Google Sheets episode"
            )

        except Exception as e:
            return self.agent.create_error_response(e)
