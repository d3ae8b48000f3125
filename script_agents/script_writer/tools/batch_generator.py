"""
Batch script generation tool.
"""
from typing import Dict, Any, List

from ...services import ValidationService
from .script_generator import content_payload


class BatchScriptTool:
    """Tool for drafting up to five scripts in one call"""

    def __init__(self, agent):
        self.agent = agent

    def register(self, server):
        """Register tool with FastMCP server"""
        @server.tool(
            name="generate_script_batch",
            description="Generate scripts for up to 5 episodes, each {topic, episode_type}; one failure does not stop the rest",
        )
        def generate_script_batch(
            episodes: List[Dict[str, Any]],
            include_seo: bool = True,
            include_description: bool = True
        ) -> Dict[str, Any]:
            return self.execute(episodes, include_seo, include_description)

    def execute(
        self,
        episodes: List[Dict[str, Any]],
        include_seo: bool = True,
        include_description: bool = True
    ) -> Dict[str, Any]:
        try:
            include_seo = ValidationService.validate_bool(include_seo, "include_seo")
            include_description = ValidationService.validate_bool(include_description, "include_description")

            result = self.agent.generation_service.generate_batch(
                episodes,
                include_seo=include_seo,
                include_description=include_description
            )

            self.agent.log_event(
                event_type="batch_completed",
                message=f"Batch generation finished: {result.successful}/{result.total_requested} succeeded",
                payload={"successful": result.successful, "failed": result.failed}
            )

            data = {
                "total_requested": result.total_requested,
                "successful": result.successful,
                "failed": result.failed,
                "results": [content_payload(content) for content in result.results],
                "errors": [error.model_dump() for error in result.errors] if result.errors else None
            }
            return self.agent.create_success_response(
                data=data,
                message=f"Batch processing completed. {result.successful} successful, {result.failed} failed."
            )

        except Exception as e:
            return self.agent.create_error_response(e)
