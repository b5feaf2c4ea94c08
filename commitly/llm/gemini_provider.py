"""Google Gemini provider implementation."""

import logging

from google import genai
from google.genai import types

from commitly.config import TEMPERATURE, Backend
from commitly.llm.base import BaseLLMProvider
from commitly.llm.exceptions import BackendError, EmptyResponseError

logger = logging.getLogger(__name__)


class GeminiProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    backend = Backend.GEMINI

    def _create_client(self, api_key: str) -> genai.Client:
        if self.timeout is None:
            return genai.Client(api_key=api_key)
        # HttpOptions takes the timeout in milliseconds
        http_options = types.HttpOptions(timeout=int(self.timeout * 1000))
        return genai.Client(api_key=api_key, http_options=http_options)

    def complete(self, system_prompt: str, user_prompt: str, model: str, api_key: str) -> str:
        """Generate a commit message using Google Gemini.

        The system prompt is sent as the model's system instruction.

        Args:
            system_prompt: The fixed system instruction.
            user_prompt: The user prompt.
            model: The model to use.
            api_key: The API key.

        Returns:
            The text of the first part of the first candidate.

        Raises:
            EmptyResponseError: If the response has no candidates or no parts.
            BackendError: If the API call fails.
        """
        client = self._create_client(api_key)

        logger.debug("Sending generate_content request to Gemini (model=%s)", model)
        try:
            response = client.models.generate_content(
                model=model,
                contents=user_prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system_prompt,
                    temperature=TEMPERATURE,
                ),
            )
        except Exception as e:
            raise BackendError(f"Gemini API call failed: {e}") from e

        if not response.candidates:
            raise EmptyResponseError("Google Gemini returned no candidates in response")

        content = response.candidates[0].content
        if content is None or not content.parts:
            raise EmptyResponseError("Empty response from Gemini API")

        return content.parts[0].text or ""
