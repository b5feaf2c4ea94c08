"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when no API key is configured for the backend
- EmptyResponseError: Raised when the backend returns no content
- BackendError: Raised when the backend SDK call fails
- UnsupportedProviderError: Raised when the effective backend is unknown
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class EmptyResponseError(LLMError):
    """Raised when the backend returns zero choices or candidates."""

    pass


class BackendError(LLMError):
    """Raised when the backend API call fails (auth, rate limit, network...)."""

    pass


class UnsupportedProviderError(LLMError):
    """Raised when a provider name does not map to a supported backend."""

    pass
