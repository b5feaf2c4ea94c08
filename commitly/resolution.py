"""Provider and credential resolution.

Decides which backend, model and API key serve a request:
- get_requested_provider: the logical provider the user asked for
- resolve_effective_provider: applies single-hop redirection from the config
- resolve_api_key: environment variable first, then the config file

None of these raise. A missing key or unknown backend is reported at
dispatch time by commitly.llm.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from commitly.config import API_KEY_ENV_VARS, DEFAULT_BACKEND, PROVIDER_ENV_VAR, Backend
from commitly.global_config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EffectiveProvider:
    """The backend and model that actually serve a request."""

    backend: str
    model: str


def get_requested_provider(config: Config, override: Optional[str] = None) -> str:
    """Determine the logical provider to use.

    Checks in order:
    1. Explicit override (e.g. the --provider CLI option)
    2. AI_PROVIDER environment variable
    3. default_provider from the config file
    4. The built-in default backend

    Args:
        config: The loaded configuration.
        override: Optional explicit provider name.

    Returns:
        The lower-cased logical provider name. It may name an unknown backend.
    """
    for candidate in (override, os.getenv(PROVIDER_ENV_VAR), config.default_provider):
        if candidate:
            return candidate.lower()
    return DEFAULT_BACKEND.value


def resolve_effective_provider(logical_provider: str, config: Config) -> EffectiveProvider:
    """Resolve the effective backend and model for a logical provider.

    If the slot's ``provider`` field is set and differs from the slot name,
    requests are redirected to that backend. Redirection is single-hop: the
    target slot's own ``provider`` field is never consulted. The model always
    comes from the originally requested slot.

    Args:
        logical_provider: The requested provider name.
        config: The loaded configuration.

    Returns:
        The EffectiveProvider. Unknown names resolve to themselves with no model.
    """
    section = config.section(logical_provider)
    if section is None:
        return EffectiveProvider(backend=logical_provider, model="")

    backend = logical_provider
    if section.provider and section.provider != logical_provider:
        backend = section.provider
        logger.debug("Provider '%s' redirected to backend '%s'", logical_provider, backend)

    return EffectiveProvider(backend=backend, model=section.model)


def resolve_api_key(backend: Backend, config: Config) -> str:
    """Get the API key for a backend.

    The backend's environment variable wins over the config file's api_key.

    Args:
        backend: The backend that will be called.
        config: The loaded configuration.

    Returns:
        The API key, or an empty string if none is configured.
    """
    env_var = API_KEY_ENV_VARS[backend]
    api_key = os.getenv(env_var)
    if api_key:
        logger.debug("Using API key from %s", env_var)
        return api_key

    return config.section(backend.value).api_key
