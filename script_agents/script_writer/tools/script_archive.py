"""
Generated script archive tool.
"""
from typing import Dict, Any

from ...services import ValidationService


class ScriptArchiveTool:
    """Tool for browsing previously generated scripts"""

    def __init__(self, agent):
        self.agent = agent

    def register(self, server):
        """Register tool with FastMCP server"""
        @server.tool(
            name="list_generated_scripts",
            description="List the most recently generated scripts from the archive (without full text)",
        )
        def list_generated_scripts(limit: int = 10) -> Dict[str, Any]:
            return self.execute(limit)

    def execute(self, limit: int = 10) -> Dict[str, Any]:
        try:
            limit = ValidationService.validate_positive_int(limit, "limit")
            scripts = self.agent.archive_service.list_recent(limit)
            return self.agent.create_success_response(
                data={"scripts": scripts, "count": len(scripts)},
                message=f"Retrieved {len(scripts)} generated scripts"
            )
        except Exception as e:
            return self.agent.create_error_response(e)
