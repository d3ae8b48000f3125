"""
Service for managing and rendering prompt templates.
"""
from typing import Dict
from string import Template

from ..common.exceptions import PromptTemplateError


class PromptService:
    """Manages prompt templates and rendering"""

    def __init__(self, agent_name: str):
        self.agent_name = agent_name
        self.templates: Dict[str, str] = {}

    def register_template(self, name: str, template: str):
        """Register a prompt template"""
        self.templates[name] = template

    def render_template(self, template_name: str, **kwargs) -> str:
        """
        Render a template with the provided variables

        Args:
            template_name: Name of the registered template
            **kwargs: Variables to substitute in template

        Returns:
            Rendered template string

        Raises:
            PromptTemplateError: If template not found or a variable is missing
        """
        if template_name not in self.templates:
            raise PromptTemplateError(f"Template '{template_name}' not found for {self.agent_name}")

        try:
            return Template(self.templates[template_name]).substitute(**kwargs)
        except KeyError as e:
            raise PromptTemplateError(
                f"Missing required parameter {e} for template '{template_name}'"
            ) from e
        except ValueError as e:
            raise PromptTemplateError(f"Failed to render template '{template_name}': {str(e)}") from e

