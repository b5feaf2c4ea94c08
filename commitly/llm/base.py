"""Base class and shared utilities for LLM backends."""

from abc import ABC, abstractmethod
from typing import Optional

from commitly.config import (
    API_KEY_EXAMPLES,
    DEFAULT_MODELS,
    DISPLAY_NAMES,
    Backend,
    get_api_key_env_var,
)
from commitly.llm.exceptions import MissingAPIKeyError


class BaseLLMProvider(ABC):
    """Abstract base class for LLM backends.

    A provider holds no per-request state. Each ``complete`` call builds its
    own SDK client, sends one request and returns the first text reply.
    """

    backend: Backend

    def __init__(self, timeout: Optional[float] = None):
        """Initialize the provider.

        Args:
            timeout: Request timeout in seconds. None keeps the SDK default.
        """
        self.timeout = timeout

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self.backend]

    @property
    def default_model(self) -> str:
        """Model used when the config leaves the model empty."""
        return DEFAULT_MODELS[self.backend]

    @abstractmethod
    def complete(self, system_prompt: str, user_prompt: str, model: str, api_key: str) -> str:
        """Send one chat request and return the first textual reply.

        Args:
            system_prompt: The fixed system instruction.
            user_prompt: The user prompt.
            model: The model to use.
            api_key: The API key for this backend.

        Returns:
            The reply text.

        Raises:
            EmptyResponseError: If the backend returns no choices/candidates.
            BackendError: If the API call fails.
        """
        pass

    def missing_api_key_error(self) -> MissingAPIKeyError:
        """Build the error raised when no API key is configured.

        Returns:
            A MissingAPIKeyError with setup instructions.
        """
        env_var = get_api_key_env_var(self.backend)
        example = API_KEY_EXAMPLES[self.backend]
        return MissingAPIKeyError(
            f"{self.display_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var}={example}\n"
            f"  2. Run: commitly config set {self.backend.value}.api_key {example}"
        )
