"""
Assembles the system and user prompts for a full-episode script.
"""
from typing import Optional

from episode_data.schemas import Episode, EpisodeType, GenerationRequest

from ..common.config import AgentConfig
from ..script_writer.prompts import (
    HOST_SYSTEM_PROMPT, EPISODE_FOCUS, EPISODE_SCRIPT_PROMPT, EPISODE_REQUIREMENTS
)
from .prompt_service import PromptService


class ScriptRequestBuilder:
    """Deterministic prompt assembly for one episode"""

    def __init__(self, podcast: Optional[dict] = None, max_tokens: Optional[int] = None):
        self.podcast = podcast or AgentConfig.PODCAST
        self.max_tokens = max_tokens or AgentConfig.OPENAI_MAX_TOKENS

        self.prompt_service = PromptService("script_writer")
        self.prompt_service.register_template("system", HOST_SYSTEM_PROMPT)
        self.prompt_service.register_template("episode", EPISODE_SCRIPT_PROMPT)
        for episode_type, lines in EPISODE_REQUIREMENTS.items():
            self.prompt_service.register_template(
                f"requirements_{episode_type}",
                "\n".join(f"- {line}" for line in lines)
            )

    def build_prompt(self, episode: Episode, episode_type: EpisodeType) -> GenerationRequest:
        """
        Build the generation request for an episode

        Host and voice come from the episode row when set, otherwise from the
        configured podcast persona.
        """
        episode_type = EpisodeType(episode_type)
        template = AgentConfig.get_template(episode_type)

        host_name = episode.host.strip() or self.podcast["host_name"]
        voice_style = episode.voice.strip() or self.podcast["voice_style"]

        structure = "\n".join(
            f"{position}. {section['name']} ({section['target']} words) - {section['description']}"
            for position, section in enumerate(template["sections"], start=1)
        )
        requirements = self.prompt_service.render_template(
            f"requirements_{episode_type.value}", host_name=host_name
        )

        system_prompt = self.prompt_service.render_template(
            "system",
            host_name=host_name,
            show_name=self.podcast["show_name"],
            episode_focus=EPISODE_FOCUS[episode_type.value]
        )
        user_prompt = self.prompt_service.render_template(
            "episode",
            topic=episode.topic,
            host_name=host_name,
            voice_style=voice_style,
            episode_template=template["name"],
            target_words=f"{template['target_words']:,}",
            requirements=requirements,
            structure=structure
        ).strip()

        return GenerationRequest(
            episode_type=episode_type,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            max_tokens=self.max_tokens,
            temperature=AgentConfig.HIGH_TEMPERATURE,
            top_p=AgentConfig.SCRIPT_TOP_P
        )
