"""
Centralized configuration for all agents.
"""
import os
from typing import Dict, Any, List

from dotenv import load_dotenv

from episode_data.schemas import EpisodeType

load_dotenv(override=False)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class AgentConfig:
    """Centralized configuration for all agents"""

    # OpenAI Configuration
    OPENAI_TOOL_MODEL = os.getenv("OPENAI_TOOL_MODEL", "gpt-4.1-mini")
    OPENAI_FINAL_MODEL = os.getenv("OPENAI_FINAL_MODEL", "gpt-4.1")
    OPENAI_MAX_TOKENS = int(os.getenv("OPENAI_MAX_TOKENS", "4000"))

    # General Configuration
    WORDS_PER_MINUTE = 155  # For podcast script timing
    DEFAULT_TEMPERATURE = 0.3
    HIGH_TEMPERATURE = 0.7
    SCRIPT_TOP_P = 0.9

    # Podcast persona
    PODCAST = {
        "host_name": os.getenv("PODCAST_HOST_NAME", "Gregory"),
        "voice_style": os.getenv("PODCAST_VOICE_STYLE", "Fabel"),
        "email": os.getenv("PODCAST_EMAIL", "cptsd@senseofthisshit.com"),
        "supporters_club_url": os.getenv(
            "SUPPORTERS_CLUB_URL",
            "https://www.spreaker.com/podcast/c-ptsd-let-s-make-sense-of-this-sh-t--6331440/support"
        ),
        "show_name": "Let's Make Sense Of This Sh*t"
    }

    # Script templates: ordered sections with target word counts
    SCRIPT_TEMPLATES = {
        EpisodeType.MAIN: {
            "name": "Main Podcast Episode",
            "target_words": 9500,
            "sections": [
                {"name": "Opening & Welcome", "target": 500, "description": "Warm opening with episode preview"},
                {"name": "Topic Introduction", "target": 1000, "description": "Personal story and topic setup"},
                {"name": "Deep Dive Part 1", "target": 1200, "description": "Core concepts and experiences"},
                {"name": "Research & Evidence", "target": 1500, "description": "Studies, citations, scientific backing"},
                {"name": "Deep Dive Part 2", "target": 1200, "description": "Advanced concepts and nuances"},
                {"name": "Listener Stories", "target": 1500, "description": "Community experiences and validation"},
                {"name": "Practical Tools Part 1", "target": 1000, "description": "Techniques and exercises"},
                {"name": "Practical Tools Part 2", "target": 1000, "description": "More tools and real-world application"},
                {"name": "Integration & Wrap-up", "target": 600, "description": "Bringing it all together and closing"}
            ]
        },
        EpisodeType.FRIDAY: {
            "name": "Friday Healing Episode",
            "target_words": 3200,
            "sections": [
                {"name": "Opening & Welcome", "target": 400, "description": "Warm Friday healing opening"},
                {"name": "Topic Exploration", "target": 800, "description": "Core topic with personal stories"},
                {"name": "Research & Evidence", "target": 600, "description": "Supporting studies and citations"},
                {"name": "Community Focus", "target": 700, "description": "Listener stories and shared experiences"},
                {"name": "Practical Tools", "target": 400, "description": "Healing techniques and exercises"},
                {"name": "Closing & Preview", "target": 300, "description": "Gentle wrap-up and next episode preview"}
            ]
        }
    }

    # Script Writer Configuration
    SCRIPT_WRITER = {
        "batch_max_items": 5,
        "topic_min_length": 3,
        "topic_max_length": 200,
        "seo_title_max_tokens": 100,
        "seo_tags_max_tokens": 200,
        "description_max_tokens": 800,
        "section_preview_chars": 100
    }

    # Episode Manager Configuration
    EPISODE_MANAGER = {
        "upcoming_default_limit": 5,
        "scheduler": {
            "timezone": os.getenv("SCHEDULER_TIMEZONE", "America/New_York"),
            "run_hour": int(os.getenv("SCHEDULER_RUN_HOUR", "6")),
            "lookahead_months": 2,
            "reentry_window_seconds": 60,
            "autostart": _env_flag("SCHEDULER_AUTOSTART")
        },
        "required_env": [
            "OPENAI_API_KEY",
            "GOOGLE_SHEETS_SPREADSHEET_ID"
        ]
    }

    @classmethod
    def get_agent_config(cls, agent_name: str) -> Dict[str, Any]:
        """Get configuration for a specific agent"""
        config_map = {
            "script-writer": cls.SCRIPT_WRITER,
            "episode-manager": cls.EPISODE_MANAGER
        }
        return config_map.get(agent_name, {})

    @classmethod
    def get_template(cls, episode_type: EpisodeType) -> Dict[str, Any]:
        return cls.SCRIPT_TEMPLATES[EpisodeType(episode_type)]

    @classmethod
    def get_section_names(cls, episode_type: EpisodeType) -> List[str]:
        return [section["name"] for section in cls.get_template(episode_type)["sections"]]
