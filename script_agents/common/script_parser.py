"""
Splits a free-text script answer into the template's named sections.
"""
import logging
from typing import List, Optional

from episode_data.schemas import EpisodeType, GeneratedScript, ScriptSection

from .config import AgentConfig

logger = logging.getLogger(__name__)


class ScriptParser:
    """Best-effort section detection over model output"""

    @staticmethod
    def parse_script(raw_text: str, episode_type: EpisodeType) -> GeneratedScript:
        """
        Chunk a script into sections by heading lines

        A line opens a section when its stripped, lower-cased text contains
        one of the template section names; the first name in template order
        wins. Lines before the first heading are dropped and heading lines
        are not kept as content. A prose line that mentions a section name
        is also taken as a heading.

        Args:
            raw_text: Script text returned by the model
            episode_type: Template whose section names are looked for

        Returns:
            GeneratedScript, flagged degraded when no heading was recognised
        """
        episode_type = EpisodeType(episode_type)
        section_names = AgentConfig.get_section_names(episode_type)
        lowered_names = [(name, name.lower()) for name in section_names]

        sections: List[ScriptSection] = []
        current: Optional[str] = None
        buffer: List[str] = []

        for line in (raw_text or "").split("\n"):
            lowered = line.strip().lower()
            match = next((name for name, key in lowered_names if key in lowered), None)

            if match:
                if current:
                    sections.append(ScriptParser._close_section(current, buffer))
                current = match
                buffer = []
            elif current:
                buffer.append(line)

        if current:
            sections.append(ScriptParser._close_section(current, buffer))

        degraded = not sections
        if degraded:
            logger.warning(
                "No section headings recognised in %s script (%d characters)",
                episode_type.value, len(raw_text or "")
            )

        return GeneratedScript(
            episode_type=episode_type,
            sections=sections,
            total_words=sum(section.word_count for section in sections),
            full_text=raw_text or "",
            degraded=degraded
        )

    @staticmethod
    def _close_section(name: str, lines: List[str]) -> ScriptSection:
        content = "\n".join(lines).strip()
        return ScriptSection(name=name, content=content, word_count=len(content.split()))
