"""
Script Writer MCP Server - FastMCP integration only.
"""
import logging

from episode_data.database import db_manager

from ..common import configure_logging
from .agent import ScriptWriterAgent

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the script writer agent"""
    configure_logging()
    db_manager.create_tables()

    agent = ScriptWriterAgent()

    if not agent.is_ready():
        logger.error("Script Writer Agent: Not ready (OpenAI client unavailable)")
        return

    logger.info("Script Writer Agent: Starting server...")
    agent.run()


if __name__ == "__main__":
    main()
