"""OpenAI GPT provider implementation."""

import logging
from typing import Optional

from openai import OpenAI

from commitly.config import TEMPERATURE, Backend
from commitly.llm.base import BaseLLMProvider
from commitly.llm.exceptions import BackendError, EmptyResponseError

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    backend = Backend.OPENAI

    # None uses the SDK's default endpoint
    base_url: Optional[str] = None

    def _create_client(self, api_key: str) -> OpenAI:
        kwargs = {"api_key": api_key, "max_retries": 0}
        if self.base_url:
            kwargs["base_url"] = self.base_url
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return OpenAI(**kwargs)

    def complete(self, system_prompt: str, user_prompt: str, model: str, api_key: str) -> str:
        """Generate a commit message using the chat completions API.

        Args:
            system_prompt: The fixed system instruction.
            user_prompt: The user prompt.
            model: The model to use.
            api_key: The API key.

        Returns:
            The content of the first choice.

        Raises:
            EmptyResponseError: If the response has no choices.
            BackendError: If the API call fails.
        """
        client = self._create_client(api_key)

        logger.debug("Sending chat completion request to %s (model=%s)", self.display_name, model)
        try:
            response = client.chat.completions.create(
                model=model,
                temperature=TEMPERATURE,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except Exception as e:
            raise BackendError(f"{self.display_name} API call failed: {e}") from e

        if not response.choices:
            raise EmptyResponseError(f"Empty response from {self.display_name} API")

        return response.choices[0].message.content or ""
