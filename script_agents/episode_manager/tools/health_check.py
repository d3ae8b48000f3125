"""
Dependency health check tool.
"""
import os
from datetime import datetime
from typing import Dict, Any, List

from sqlalchemy.exc import SQLAlchemyError

from episode_data.services import event_service

from ...common.exceptions import ServiceError


class HealthCheckTool:
    """Tool for checking spreadsheet, OpenAI and configuration health"""

    def __init__(self, agent):
        self.agent = agent

    def register(self, server):
        """Register tool with FastMCP server"""
        @server.tool(
            name="check_health",
            description="Check Google Sheets and OpenAI reachability and required environment variables",
        )
        def check_health() -> Dict[str, Any]:
            return self.execute()

    def execute(self) -> Dict[str, Any]:
        dependencies: Dict[str, Any] = {}

        try:
            self.agent.openai.test_connection()
            dependencies["openai"] = {"status": "healthy", "message": "API accessible"}
        except ServiceError as e:
            dependencies["openai"] = {"status": "unhealthy", "message": str(e), "error": getattr(e, "code", None)}

        try:
            self.agent.episode_service.sheets.test_connection()
            dependencies["google_sheets"] = {"status": "healthy", "message": "API accessible"}
        except ServiceError as e:
            dependencies["google_sheets"] = {"status": "unhealthy", "message": str(e), "error": getattr(e, "code", None)}

        try:
            dependencies["archive"] = {
                "status": "healthy",
                "generated_scripts": self.agent.archive_service.count()
            }
        except SQLAlchemyError as e:
            dependencies["archive"] = {"status": "unhealthy", "message": str(e)}

        try:
            recent_events = event_service.get_recent_events(limit=5)
        except SQLAlchemyError:
            recent_events = []

        missing = self.missing_environment()
        dependencies["environment"] = {
            "status": "unhealthy" if missing else "healthy",
            "missing": missing
        }

        healthy = all(dependency["status"] == "healthy" for dependency in dependencies.values())
        return self.agent.create_success_response(
            data={
                "status": "healthy" if healthy else "degraded",
                "timestamp": datetime.now().isoformat(),
                "dependencies": dependencies,
                "scheduler": {"is_running": self.agent.scheduler.is_running},
                "recent_events": recent_events
            },
            message="All systems operational" if healthy else "Some dependencies are unhealthy"
        )

    def missing_environment(self) -> List[str]:
        missing = [name for name in self.agent.config["required_env"] if not os.getenv(name)]
        if not os.getenv("GOOGLE_SERVICE_ACCOUNT_FILE"):
            missing.extend(
                name for name in ("GOOGLE_SERVICE_ACCOUNT_EMAIL", "GOOGLE_PRIVATE_KEY")
                if not os.getenv(name)
            )
        return missing
