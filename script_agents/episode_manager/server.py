"""
Episode Manager MCP Server - FastMCP integration only.
"""
import logging

from episode_data.database import db_manager

from ..common import configure_logging
from .agent import EpisodeManagerAgent

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the episode manager agent"""
    configure_logging()
    db_manager.create_tables()

    agent = EpisodeManagerAgent()

    if not agent.is_ready():
        logger.warning("Episode Manager Agent: OpenAI client unavailable, scheduled generation will fail")

    logger.info("Episode Manager Agent: Starting server...")
    agent.run()


if __name__ == "__main__":
    main()
