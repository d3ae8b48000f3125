"""
Topic-driven script generation tool.
"""
from typing import Dict, Any

from episode_data.schemas import Episode, GeneratedContent

from ...services import ValidationService, MetricsService


def content_payload(content: GeneratedContent) -> Dict[str, Any]:
    """Serializable view of generated content with script metrics"""
    payload = content.model_dump(mode="json")
    payload["metrics"] = MetricsService.script_metrics(content.script)
    payload["section_report"] = MetricsService.section_report(content.script)
    return payload


class GenerateScriptTool:
    """Tool for drafting a script from a topic and episode type"""

    def __init__(self, agent):
        self.agent = agent

    def register(self, server):
        """Register tool with FastMCP server"""
        @server.tool(
            name="generate_script",
            description="Generate a complete podcast script (main or friday) for a topic, with optional SEO title, tags and description",
        )
        def generate_script(
            topic: str,
            episode_type: str,
            include_seo: bool = True,
            include_description: bool = True
        ) -> Dict[str, Any]:
            return self.execute(topic, episode_type, include_seo, include_description)

    def execute(
        self,
        topic: str,
        episode_type: str,
        include_seo: bool = True,
        include_description: bool = True
    ) -> Dict[str, Any]:
        try:
            # Validate inputs
            topic = ValidationService.validate_topic(topic)
            episode_type = ValidationService.validate_episode_type(episode_type)
            include_seo = ValidationService.validate_bool(include_seo, "include_seo")
            include_description = ValidationService.validate_bool(include_description, "include_description")

            content = self.agent.generation_service.generate_content(
                Episode(topic=topic),
                episode_type,
                include_seo=include_seo,
                include_description=include_description
            )

            self.agent.log_event(
                event_type="script_generated",
                message=f"Generated {episode_type.value} episode script",
                topic=topic,
                payload=MetricsService.script_metrics(content.script)
            )

            return self.agent.create_success_response(
                data=content_payload(content),
                message="Script generated successfully"
            )

        except Exception as e:
            return self.agent.create_error_response(e)
