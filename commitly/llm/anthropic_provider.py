"""Anthropic Claude provider implementation."""

import logging

from anthropic import Anthropic

from commitly.config import MAX_TOKENS, Backend
from commitly.llm.base import BaseLLMProvider
from commitly.llm.exceptions import BackendError, EmptyResponseError

logger = logging.getLogger(__name__)


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    backend = Backend.CLAUDE

    def complete(self, system_prompt: str, user_prompt: str, model: str, api_key: str) -> str:
        """Generate a commit message using the Anthropic messages API.

        Args:
            system_prompt: The fixed system instruction.
            user_prompt: The user prompt.
            model: The model to use.
            api_key: The API key.

        Returns:
            The text of the first content block.

        Raises:
            EmptyResponseError: If the response has no content blocks.
            BackendError: If the API call fails.
        """
        kwargs = {"api_key": api_key, "max_retries": 0}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        client = Anthropic(**kwargs)

        logger.debug("Sending messages request to Claude (model=%s)", model)
        try:
            message = client.messages.create(
                model=model,
                max_tokens=MAX_TOKENS,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except Exception as e:
            raise BackendError(f"Claude API call failed: {e}") from e

        if not message.content:
            raise EmptyResponseError("Empty response from Claude API")

        return getattr(message.content[0], "text", "") or ""
