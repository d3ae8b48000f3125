"""
Base agent class providing common functionality for all agents.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional

from mcp.server.fastmcp.server import FastMCP
from sqlalchemy.exc import SQLAlchemyError

from episode_data.schemas import AgentEventCreate
from episode_data.services import event_service

from .openai_client import OpenAIManager
from .config import AgentConfig
from .exceptions import ServiceError, ValidationError

logger = logging.getLogger(__name__)


class BaseAgent(ABC):
    """Abstract base class for all agents"""

    def __init__(self, name: str, instructions: str, openai_manager: Optional[OpenAIManager] = None):
        self.name = name
        self.instructions = instructions
        self.config = AgentConfig.get_agent_config(name)

        # Initialize OpenAI manager
        self.openai = openai_manager or OpenAIManager(name)

        # Initialize FastMCP server
        self.server = FastMCP(name=name, instructions=instructions)

    def is_ready(self) -> bool:
        """Check if agent is ready to process requests"""
        return self.openai.is_available()

    def log_event(
        self,
        event_type: str,
        message: str,
        topic: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None
    ):
        """Log an agent event"""
        try:
            event_service.log_event(AgentEventCreate(
                agent_name=self.name,
                event_type=event_type,
                topic=topic,
                message=message,
                payload=payload or {}
            ))
        except SQLAlchemyError as e:
            logger.warning("Failed to log event for %s: %s", self.name, e)

    def create_error_response(self, error: Exception) -> Dict[str, Any]:
        """Create standardized error envelope from an exception"""
        status_code = error.status_code if isinstance(error, ServiceError) else 500
        if status_code >= 500:
            logger.error("%s operation failed: %s", self.name, error, exc_info=not isinstance(error, ServiceError))

        body: Dict[str, Any] = {
            "message": str(error) or f"{self.name} operation failed",
            "statusCode": status_code
        }
        if isinstance(error, ValidationError):
            body["details"] = error.details

        return {
            "success": False,
            "agent": self.name,
            "error": body
        }

    def create_success_response(
        self,
        data: Any,
        message: Optional[str] = None
    ) -> Dict[str, Any]:
        """Create standardized success envelope"""
        response = {
            "success": True,
            "agent": self.name,
            "data": data
        }
        if message:
            response["message"] = message
        return response

    @abstractmethod
    def get_tools(self) -> List[Any]:
        """Return list of tools this agent provides"""
        pass

    def register_tools(self):
        """Register all tools with the FastMCP server"""
        tools = self.get_tools()
        for tool in tools:
            if hasattr(tool, 'register'):
                tool.register(self.server)

    def run(self):
        """Start the agent server"""
        self.register_tools()
        self.server.run()
