"""
Script, SEO and description generation pipeline.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from episode_data.schemas import (
    BatchItemError, BatchResult, Episode, EpisodeType, GeneratedContent,
    GeneratedScript, ScriptRequest, SEOContent
)
from episode_data.services import ScriptArchiveService

from ..common.config import AgentConfig
from ..common.exceptions import OpenAIError
from ..common.openai_client import OpenAIManager
from ..common.script_parser import ScriptParser
from ..script_writer.prompts import (
    SEO_TITLE_SYSTEM, SEO_TITLE_PROMPT, SEO_TAGS_SYSTEM, SEO_TAGS_PROMPT,
    DESCRIPTION_SYSTEM, DESCRIPTION_PROMPT
)
from .prompt_service import PromptService
from .request_builder import ScriptRequestBuilder
from .validation_service import ValidationService

logger = logging.getLogger(__name__)


def episode_ref(episode: Episode, source: str) -> str:
    """Stable-enough reference for archive rows"""
    if episode.row_index:
        return f"{source}:row-{episode.row_index}"
    return f"{source}:{episode.topic.lower().replace(' ', '-')}"


class ScriptGenerationService:
    """Turns episodes into scripts with SEO copy, one model call per artifact"""

    def __init__(
        self,
        openai_manager: OpenAIManager,
        archive: Optional[ScriptArchiveService] = None,
        request_builder: Optional[ScriptRequestBuilder] = None
    ):
        self.openai = openai_manager
        self.archive = archive
        self.request_builder = request_builder or ScriptRequestBuilder()
        self.config = AgentConfig.SCRIPT_WRITER

        self.prompt_service = PromptService("script_writer")
        self.prompt_service.register_template("seo_title", SEO_TITLE_PROMPT)
        self.prompt_service.register_template("seo_tags", SEO_TAGS_PROMPT)
        self.prompt_service.register_template("description", DESCRIPTION_PROMPT)

    def generate_script(self, episode: Episode, episode_type: EpisodeType) -> GeneratedScript:
        """
        Draft a full episode script and split it into template sections

        Raises:
            OpenAIError: If the completion call fails
        """
        episode_type = EpisodeType(episode_type)
        request = self.request_builder.build_prompt(episode, episode_type)

        try:
            text, usage = self.openai.complete(
                request.system_prompt,
                request.user_prompt,
                max_tokens=request.max_tokens,
                temperature=request.temperature,
                model=AgentConfig.OPENAI_FINAL_MODEL,
                top_p=request.top_p
            )
        except OpenAIError as e:
            logger.error(
                "Failed to generate %s episode script (topic=%s): %s",
                episode_type.value, episode.topic, e
            )
            raise

        logger.info(
            "Generated %s episode script (topic=%s, usage=%s)",
            episode_type.value, episode.topic, usage
        )
        return ScriptParser.parse_script(text, episode_type)

    def generate_seo_title(self, topic: str) -> str:
        prompt = self.prompt_service.render_template(
            "seo_title", topic=topic, host_name=AgentConfig.PODCAST["host_name"]
        )
        title = self._complete_short(
            "SEO title", topic, SEO_TITLE_SYSTEM, prompt, self.config["seo_title_max_tokens"]
        )
        logger.info("Generated SEO title (topic=%s, title=%s)", topic, title)
        return title

    def generate_seo_tags(self, topic: str) -> List[str]:
        prompt = self.prompt_service.render_template("seo_tags", topic=topic)
        raw_tags = self._complete_short(
            "SEO tags", topic, SEO_TAGS_SYSTEM, prompt, self.config["seo_tags_max_tokens"]
        )
        tags = [tag.strip() for tag in raw_tags.split(",") if tag.strip()]
        logger.info("Generated %d SEO tags (topic=%s)", len(tags), topic)
        return tags

    def generate_description(self, topic: str, script: GeneratedScript) -> str:
        preview_chars = self.config["section_preview_chars"]
        section_previews = "\n".join(
            f"- {section.name}: {section.content[:preview_chars]}..."
            for section in script.sections
        ) or "- (no sections recognised)"

        prompt = self.prompt_service.render_template(
            "description",
            topic=topic,
            host_name=AgentConfig.PODCAST["host_name"],
            section_previews=section_previews,
            email=AgentConfig.PODCAST["email"],
            supporters_club_url=AgentConfig.PODCAST["supporters_club_url"]
        )

        try:
            text, _ = self.openai.complete(
                DESCRIPTION_SYSTEM,
                prompt.strip(),
                max_tokens=self.config["description_max_tokens"],
                temperature=AgentConfig.HIGH_TEMPERATURE,
                model=AgentConfig.OPENAI_FINAL_MODEL
            )
        except OpenAIError as e:
            logger.error("Failed to generate episode description (topic=%s): %s", topic, e)
            raise

        logger.info("Generated episode description (topic=%s)", topic)
        return text.strip()

    def _complete_short(self, operation: str, topic: str, system_prompt: str, prompt: str, max_tokens: int) -> str:
        try:
            text, _ = self.openai.complete(
                system_prompt,
                prompt.strip(),
                max_tokens=max_tokens,
                temperature=AgentConfig.DEFAULT_TEMPERATURE,
                model=AgentConfig.OPENAI_TOOL_MODEL
            )
        except OpenAIError as e:
            logger.error("Failed to generate %s (topic=%s): %s", operation, topic, e)
            raise
        return text.strip()

    def generate_content(
        self,
        episode: Episode,
        episode_type: EpisodeType,
        include_seo: bool = True,
        include_description: bool = True,
        source: str = "api"
    ) -> GeneratedContent:
        """Script plus optional SEO title/tags and description, archived best-effort"""
        episode_type = EpisodeType(episode_type)
        script = self.generate_script(episode, episode_type)

        seo = None
        if include_seo:
            seo = SEOContent(
                title=self.generate_seo_title(episode.topic),
                tags=self.generate_seo_tags(episode.topic)
            )

        description = self.generate_description(episode.topic, script) if include_description else None

        content = GeneratedContent(
            episode_ref=episode_ref(episode, source),
            topic=episode.topic,
            episode_type=episode_type,
            episode=episode if episode.row_index else None,
            script=script,
            seo=seo,
            description=description,
            source=source
        )
        self._archive(content)
        return content

    def _archive(self, content: GeneratedContent):
        if self.archive is None:
            return
        try:
            self.archive.save_content(content)
        except SQLAlchemyError as e:
            logger.warning("Failed to archive generated script (topic=%s): %s", content.topic, e)

    def generate_batch(
        self,
        episodes: List[dict],
        include_seo: bool = True,
        include_description: bool = True
    ) -> BatchResult:
        """
        Generate several scripts in order, isolating per-item failures

        Every item is validated before the first model call.

        Raises:
            ValidationError: If the list or any item is invalid
        """
        requests: List[ScriptRequest] = ValidationService.validate_batch(episodes)

        results: List[GeneratedContent] = []
        errors: List[BatchItemError] = []

        for request in requests:
            try:
                results.append(self.generate_content(
                    Episode(topic=request.topic),
                    request.episode_type,
                    include_seo=include_seo,
                    include_description=include_description
                ))
            except Exception as e:
                logger.error("Batch item failed (topic=%s): %s", request.topic, e)
                errors.append(BatchItemError(topic=request.topic, error=str(e)))

        return BatchResult(
            total_requested=len(requests),
            successful=len(results),
            failed=len(errors),
            results=results,
            errors=errors or None
        )
