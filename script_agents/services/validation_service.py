"""
Service for input validation and sanitization.
"""
from typing import Any, List, Optional

from episode_data.schemas import EpisodeType, ScriptRequest

from ..common.config import AgentConfig
from ..common.exceptions import ValidationError


class ValidationService:
    """Handles input validation and sanitization"""

    @staticmethod
    def validate_positive_int(value: Any, field_name: str, min_value: int = 1) -> int:
        """Validate positive integer field"""
        if isinstance(value, bool):
            raise ValidationError(f"{field_name} must be a valid integer", field=field_name)
        try:
            int_value = int(value)
        except (ValueError, TypeError):
            raise ValidationError(f"{field_name} must be a valid integer", field=field_name)
        if int_value < min_value:
            raise ValidationError(f"{field_name} must be at least {min_value}", field=field_name)
        return int_value

    @staticmethod
    def validate_string(
        value: Any,
        field_name: str,
        min_length: int = 1,
        max_length: Optional[int] = None
    ) -> str:
        """Validate string field"""
        if not isinstance(value, str):
            raise ValidationError(f"{field_name} must be a string", field=field_name)

        value = value.strip()
        if not value:
            raise ValidationError(f"{field_name} cannot be empty", field=field_name)

        if len(value) < min_length:
            raise ValidationError(
                f"{field_name} must be at least {min_length} characters", field=field_name
            )

        if max_length and len(value) > max_length:
            raise ValidationError(
                f"{field_name} cannot exceed {max_length} characters", field=field_name
            )

        return value

    @staticmethod
    def validate_choice(value: Any, field_name: str, choices: List[str]) -> str:
        """Validate that value is one of the allowed choices"""
        if value not in choices:
            raise ValidationError(f"{field_name} must be one of: {', '.join(choices)}", field=field_name)
        return value

    @staticmethod
    def validate_bool(value: Any, field_name: str) -> bool:
        if not isinstance(value, bool):
            raise ValidationError(f"{field_name} must be a boolean", field=field_name)
        return value

    @staticmethod
    def validate_list_length(
        value: Any,
        field_name: str,
        min_length: int = 0,
        max_length: Optional[int] = None
    ) -> List[Any]:
        """Validate list length"""
        if not isinstance(value, list):
            raise ValidationError(f"{field_name} must be a list", field=field_name)

        if len(value) < min_length:
            raise ValidationError(f"{field_name} must have at least {min_length} items", field=field_name)

        if max_length and len(value) > max_length:
            raise ValidationError(f"{field_name} cannot have more than {max_length} items", field=field_name)

        return value

    @staticmethod
    def validate_topic(topic: Any, field_name: str = "topic") -> str:
        config = AgentConfig.SCRIPT_WRITER
        return ValidationService.validate_string(
            topic,
            field_name,
            min_length=config["topic_min_length"],
            max_length=config["topic_max_length"]
        )

    @staticmethod
    def validate_episode_type(episode_type: Any, field_name: str = "episode_type") -> EpisodeType:
        value = ValidationService.validate_choice(
            episode_type, field_name, [t.value for t in EpisodeType]
        )
        return EpisodeType(value)

    @staticmethod
    def validate_batch(episodes: Any) -> List[ScriptRequest]:
        """
        Validate every batch item before any generation starts

        Raises:
            ValidationError: With one detail line per invalid field
        """
        max_items = AgentConfig.SCRIPT_WRITER["batch_max_items"]
        ValidationService.validate_list_length(episodes, "episodes", min_length=1, max_length=max_items)

        requests: List[ScriptRequest] = []
        details: List[str] = []
        for index, item in enumerate(episodes):
            if not isinstance(item, dict):
                details.append(f"episodes[{index}] must be an object with topic and episode_type")
                continue
            try:
                topic = ValidationService.validate_topic(item.get("topic"), f"episodes[{index}].topic")
                episode_type = ValidationService.validate_episode_type(
                    item.get("episode_type", item.get("episodeType")),
                    f"episodes[{index}].episode_type"
                )
            except ValidationError as e:
                details.append(str(e))
                continue
            requests.append(ScriptRequest(topic=topic, episode_type=episode_type))

        if details:
            raise ValidationError("Invalid batch request", field="episodes", details=details)

        return requests

