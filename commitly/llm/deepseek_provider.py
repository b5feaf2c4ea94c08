"""Deepseek provider implementation.

Deepseek exposes an OpenAI-compatible API, so the request shape is the
OpenAI one pointed at a different base URL.
"""

from commitly.config import Backend
from commitly.llm.openai_provider import OpenAIProvider

# Deepseek API base URL
DEEPSEEK_BASE_URL = "https://api.deepseek.com"


class DeepseekProvider(OpenAIProvider):
    """Deepseek LLM provider."""

    backend = Backend.DEEPSEEK
    base_url = DEEPSEEK_BASE_URL
