"""
Episode statistics and sheet structure tools.
"""
from typing import Dict, Any


class SheetInsightsTool:
    """Tool for summarising the spreadsheet"""

    def __init__(self, agent):
        self.agent = agent

    def register(self, server):
        """Register multiple tools with FastMCP server"""

        @server.tool(
            name="get_episode_statistics",
            description="Episode counts by demand, supply, category, voice and status",
        )
        def get_episode_statistics() -> Dict[str, Any]:
            return self.get_statistics()

        @server.tool(
            name="get_sheet_structure",
            description="Sheet headers, the recognised column for each field and a sample episode",
        )
        def get_sheet_structure() -> Dict[str, Any]:
            return self.get_structure()

    def get_statistics(self) -> Dict[str, Any]:
        try:
            stats = self.agent.episode_service.get_statistics()
            return self.agent.create_success_response(
                data=stats,
                message="Episode statistics retrieved"
            )
        except Exception as e:
            return self.agent.create_error_response(e)

    def get_structure(self) -> Dict[str, Any]:
        try:
            structure = self.agent.episode_service.get_structure()
            return self.agent.create_success_response(
                data=structure,
                message="Sheet structure retrieved"
            )
        except Exception as e:
            return self.agent.create_error_response(e)
