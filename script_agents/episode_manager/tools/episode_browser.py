"""
Episode listing, ranking and lookup tools.
"""
from typing import Dict, Any, Optional

from ...services import ValidationService


def _dump(episodes):
    return [episode.model_dump(mode="json") for episode in episodes]


class EpisodeBrowserTool:
    """Tool for reading episodes out of the spreadsheet"""

    def __init__(self, agent):
        self.agent = agent

    def register(self, server):
        """Register multiple tools with FastMCP server"""

        @server.tool(
            name="get_episodes",
            description="List all CPTSD Recovery episodes from the Google Sheet, or those matching a search term",
        )
        def get_episodes(search: Optional[str] = None) -> Dict[str, Any]:
            return self.list_episodes(search)

        @server.tool(
            name="get_upcoming_episodes",
            description="Unprocessed episodes ranked by date, then demand",
        )
        def get_upcoming_episodes(limit: Optional[int] = None) -> Dict[str, Any]:
            return self.get_upcoming(limit)

        @server.tool(
            name="get_episode_by_topic",
            description="Find the first episode whose topic or title contains the given text",
        )
        def get_episode_by_topic(topic: str) -> Dict[str, Any]:
            return self.get_by_topic(topic)

    def list_episodes(self, search: Optional[str] = None) -> Dict[str, Any]:
        try:
            if search is not None:
                search = ValidationService.validate_string(search, "search")
                episodes = self.agent.episode_service.search(search)
                return self.agent.create_success_response(
                    data={"episodes": _dump(episodes), "total": len(episodes), "search": search},
                    message=f"Found {len(episodes)} episodes matching \"{search}\""
                )

            sheet = self.agent.episode_service.fetch_sheet()
            return self.agent.create_success_response(
                data={
                    "episodes": _dump(sheet.episodes),
                    "total": sheet.total_episodes,
                    "headers": sheet.headers
                },
                message=f"Retrieved {sheet.total_episodes} episodes"
            )
        except Exception as e:
            return self.agent.create_error_response(e)

    def get_upcoming(self, limit: Optional[int] = None) -> Dict[str, Any]:
        try:
            if limit is None:
                limit = self.agent.config["upcoming_default_limit"]
            limit = ValidationService.validate_positive_int(limit, "limit")
            episodes = self.agent.episode_service.get_upcoming(limit)
            return self.agent.create_success_response(
                data={"episodes": _dump(episodes), "total": len(episodes)},
                message=f"Retrieved {len(episodes)} upcoming episodes"
            )
        except Exception as e:
            return self.agent.create_error_response(e)

    def get_by_topic(self, topic: str) -> Dict[str, Any]:
        try:
            topic = ValidationService.validate_string(topic, "topic")
            episode = self.agent.episode_service.get_by_topic(topic)
            return self.agent.create_success_response(
                data=episode.model_dump(mode="json"),
                message=f"Found episode: {episode.topic}"
            )
        except Exception as e:
            return self.agent.create_error_response(e)
