"""LLM backend module for commitly.

This module provides a unified interface to the supported LLM backends.
The backend, model and API key are resolved from the loaded Config by
commitly.resolution; this module dispatches the request.
"""

import logging
from typing import Optional

from dotenv import load_dotenv

from commitly.config import Backend
from commitly.global_config import Config
from commitly.llm.base import BaseLLMProvider
from commitly.llm.exceptions import (
    BackendError,
    EmptyResponseError,
    LLMError,
    MissingAPIKeyError,
    UnsupportedProviderError,
)
from commitly.llm.prompts import SYSTEM_PROMPT, build_user_prompt
from commitly.resolution import EffectiveProvider, resolve_api_key

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def get_provider(backend: Backend | str, timeout: Optional[float] = None) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        backend: The backend to use.
        timeout: Request timeout in seconds. None keeps the SDK default.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        UnsupportedProviderError: If the backend is not supported.
    """
    try:
        backend = Backend(backend)
    except ValueError:
        raise UnsupportedProviderError(
            f"Unsupported provider: {backend}. "
            f"Valid providers: {', '.join(b.value for b in Backend)}"
        ) from None

    if backend == Backend.OPENAI:
        from commitly.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(timeout=timeout)

    elif backend == Backend.CLAUDE:
        from commitly.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(timeout=timeout)

    elif backend == Backend.DEEPSEEK:
        from commitly.llm.deepseek_provider import DeepseekProvider

        return DeepseekProvider(timeout=timeout)

    else:
        from commitly.llm.gemini_provider import GeminiProvider

        return GeminiProvider(timeout=timeout)


def generate_commit_message(
    prompt: str,
    effective: EffectiveProvider,
    config: Config,
    timeout: Optional[float] = None,
) -> str:
    """Generate a commit message with the effective backend.

    This is the main entry point for generating commit messages. The request
    is sent once; failures are not retried.

    Args:
        prompt: The user prompt from build_user_prompt().
        effective: The resolved backend and model.
        config: The loaded configuration (for the config-file API key).
        timeout: Request timeout in seconds. None keeps the SDK default.

    Returns:
        The generated commit message text.

    Raises:
        UnsupportedProviderError: If the effective backend is unknown.
        MissingAPIKeyError: If no API key is configured for the backend.
        EmptyResponseError: If the backend returns no content.
        BackendError: If the backend API call fails.
    """
    provider = get_provider(effective.backend, timeout=timeout)

    api_key = resolve_api_key(provider.backend, config)
    if not api_key:
        raise provider.missing_api_key_error()

    model = effective.model or provider.default_model
    logger.debug("Dispatching to backend=%s model=%s", provider.backend.value, model)

    return provider.complete(SYSTEM_PROMPT, prompt, model, api_key)


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "EmptyResponseError",
    "BackendError",
    "UnsupportedProviderError",
    "SYSTEM_PROMPT",
    "build_user_prompt",
    "get_provider",
    "generate_commit_message",
]
