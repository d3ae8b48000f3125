"""
Centralized OpenAI client management for all agents.
"""
import os
import logging
from typing import Optional, Dict, Any, List, Tuple

import openai
from openai import OpenAI
from dotenv import load_dotenv

from .config import AgentConfig
from .exceptions import OpenAIError, RateLimitError, AuthenticationError, UpstreamServerError

logger = logging.getLogger(__name__)


def translate_openai_error(error: Exception) -> OpenAIError:
    """Classify an SDK exception by HTTP status"""
    if isinstance(error, openai.RateLimitError):
        return RateLimitError("OpenAI API rate limit exceeded. Please try again later.", code=429)
    if isinstance(error, openai.AuthenticationError):
        return AuthenticationError("OpenAI API authentication failed. Please check your API key.", code=401)
    if isinstance(error, openai.APIStatusError):
        if error.status_code >= 500:
            return UpstreamServerError("OpenAI API service error. Please try again later.", code=error.status_code)
        return OpenAIError(f"OpenAI API call failed: {error}", code=error.status_code)
    return OpenAIError(f"OpenAI API call failed: {error}")


class OpenAIManager:
    """Manages OpenAI client initialization and common operations"""

    def __init__(self, agent_name: str, client: Optional[OpenAI] = None):
        self.agent_name = agent_name
        self.client = client
        self.available = client is not None
        if client is None:
            self._initialize_client()

    def _initialize_client(self):
        """Initialize OpenAI client with proper error handling"""
        load_dotenv(override=False)

        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            logger.error("%s: OPENAI_API_KEY not found in environment", self.agent_name)
            self.available = False
            return

        try:
            self.client = OpenAI(api_key=api_key)
            self.available = True
            logger.info("%s: OpenAI client initialized", self.agent_name)
        except openai.OpenAIError as e:
            logger.error("%s: OpenAI client initialization failed: %s", self.agent_name, e)
            self.available = False

    def is_available(self) -> bool:
        """Check if OpenAI client is available"""
        return self.available

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
        model: Optional[str] = None,
        **kwargs
    ) -> Tuple[str, Dict[str, Any]]:
        """
        Run a single system + user chat completion

        Args:
            system_prompt: System message content
            user_prompt: User message content
            max_tokens: Completion token limit
            temperature: Sampling temperature
            model: Model name, defaults to the final (higher quality) model
            **kwargs: Additional OpenAI parameters (top_p, ...)

        Returns:
            Tuple of response text and token usage stats

        Raises:
            OpenAIError: Or one of its subclasses, classified by status code
        """
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt}
        ]

        if not self.available:
            raise OpenAIError("OpenAI client not available")

        try:
            response = self.client.chat.completions.create(
                model=model or AgentConfig.OPENAI_FINAL_MODEL,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
                **kwargs
            )
        except openai.OpenAIError as e:
            raise translate_openai_error(e) from e

        text = response.choices[0].message.content or ""
        usage = response.usage.model_dump() if response.usage else {}
        return text, usage

    def test_connection(self) -> bool:
        if not self.available:
            raise OpenAIError("OpenAI client not available")
        try:
            self.client.models.list()
        except openai.OpenAIError as e:
            raise translate_openai_error(e) from e
        return True
