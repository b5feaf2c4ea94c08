"""Global configuration management for commitly.

Handles the user-level configuration document stored in ~/.commitly.json.
The document holds one section per LLM backend plus the default provider:

    {
      "openai":   {"provider": "openai", "api_key": "", "model": "gpt-4o"},
      ...
      "default_provider": "openai"
    }

Config keys are addressed as ``section.field`` (e.g. ``openai.api_key``).
"""

import logging
import os
import stat
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from commitly.config import DEFAULT_BACKEND, DEFAULT_MODELS, Backend

logger = logging.getLogger(__name__)


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""

    pass


class ConfigReadError(GlobalConfigError):
    """Raised when the config file exists but cannot be read."""

    pass


class ConfigWriteError(GlobalConfigError):
    """Raised when the config file cannot be written."""

    pass


class ConfigParseError(GlobalConfigError):
    """Raised when the config file contents do not decode into a Config."""

    pass


class InvalidKeyError(GlobalConfigError):
    """Raised when a config key is not a known ``section.field`` pair."""

    pass


DEFAULT_SECTION = "default"
PROVIDER_FIELDS = ("api_key", "provider", "model")
DEFAULT_FIELDS = ("provider",)
_BACKEND_NAMES = tuple(backend.value for backend in Backend)

_CONFIG_FILE = Path.home() / ".commitly.json"
_CONFIG_FILE_MODE = stat.S_IRUSR | stat.S_IWUSR


class ProviderConfig(BaseModel):
    """Configuration for one logical provider slot.

    Attributes:
        provider: Backend that actually serves this slot. A value different
            from the slot name redirects requests to that backend.
        api_key: API key stored in the config file (may be empty).
        model: Model name (may be empty, the backend default is used then).
    """

    provider: str = ""
    api_key: str = ""
    model: str = ""


class Config(BaseModel):
    """The whole configuration document."""

    openai: ProviderConfig = Field(default_factory=ProviderConfig)
    claude: ProviderConfig = Field(default_factory=ProviderConfig)
    deepseek: ProviderConfig = Field(default_factory=ProviderConfig)
    gemini: ProviderConfig = Field(default_factory=ProviderConfig)
    default_provider: str = ""

    def section(self, name: str) -> Optional[ProviderConfig]:
        """Get the provider section for a logical provider name.

        Args:
            name: Logical provider name (openai, claude, deepseek, gemini).

        Returns:
            The ProviderConfig, or None if the name is not a known backend.
        """
        if name not in _BACKEND_NAMES:
            return None
        return getattr(self, name)


def default_config() -> Config:
    """Build the built-in configuration used when no file exists.

    Returns:
        A Config with standard model names and empty API keys.
    """
    sections = {
        backend.value: ProviderConfig(provider=backend.value, model=DEFAULT_MODELS[backend])
        for backend in Backend
    }
    return Config(default_provider=DEFAULT_BACKEND.value, **sections)


def get_config_file_path() -> Path:
    """Get path to the config file.

    Returns:
        Path to ~/.commitly.json
    """
    return _CONFIG_FILE


def is_configured() -> bool:
    """Check if a config file has been written.

    Returns:
        True if ~/.commitly.json exists, False otherwise.
    """
    return get_config_file_path().exists()


def load_config() -> Config:
    """Load configuration from ~/.commitly.json.

    No file is created when the config is missing.

    Returns:
        The parsed Config, or the built-in default if the file doesn't exist.

    Raises:
        ConfigReadError: If the file exists but cannot be read.
        ConfigParseError: If the file contents are not a valid config document.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        logger.debug("No config file at %s, using defaults", config_file)
        return default_config()

    try:
        raw = config_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Config file {config_file} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigReadError(f"Failed to read config file {config_file}: {e}") from e

    try:
        return Config.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigParseError(f"Failed to parse config file {config_file}: {e}") from e


def save_config(config: Config) -> None:
    """Save configuration to ~/.commitly.json with owner-only permissions.

    Args:
        config: The configuration to save.

    Raises:
        ConfigWriteError: If the file cannot be written.
    """
    config_file = get_config_file_path()

    try:
        # Owner read/write only, the file may hold API keys
        fd = os.open(config_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _CONFIG_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            # O_CREAT only applies the mode to new files
            os.fchmod(f.fileno(), _CONFIG_FILE_MODE)
            f.write(config.model_dump_json(indent=2) + "\n")
    except OSError as e:
        raise ConfigWriteError(f"Failed to write config file {config_file}: {e}") from e

    logger.debug("Saved config to %s", config_file)


def parse_config_key(key: str) -> tuple[str, str]:
    """Split and validate a ``section.field`` config key.

    Args:
        key: The config key, e.g. "openai.api_key" or "default.provider".

    Returns:
        A (section, field) tuple.

    Raises:
        InvalidKeyError: If the key is malformed or names an unknown section/field.
    """
    parts = key.split(".")
    if len(parts) != 2:
        raise InvalidKeyError(
            f"Invalid config key format: '{key}', expected 'section.field'"
        )

    section, field = parts

    if section == DEFAULT_SECTION:
        if field not in DEFAULT_FIELDS:
            raise InvalidKeyError(f"Unknown key for {section}: {field}")
    elif section in _BACKEND_NAMES:
        if field not in PROVIDER_FIELDS:
            raise InvalidKeyError(f"Unknown key for {section}: {field}")
    else:
        raise InvalidKeyError(f"Unknown config section: {section}")

    return section, field


def get_value(key: str, config: Optional[Config] = None) -> str:
    """Look up one scalar config value.

    Args:
        key: The config key in ``section.field`` form.
        config: Already loaded config. Loaded from disk when omitted.

    Returns:
        The value (may be empty).

    Raises:
        InvalidKeyError: If the key is not valid.
        ConfigReadError: If the config file cannot be read.
        ConfigParseError: If the config file is malformed.
    """
    section, field = parse_config_key(key)
    if config is None:
        config = load_config()

    if section == DEFAULT_SECTION:
        return config.default_provider
    return getattr(config.section(section), field)


def set_value(key: str, value: str) -> None:
    """Set one config value and save the whole document.

    Args:
        key: The config key in ``section.field`` form.
        value: The new value.

    Raises:
        InvalidKeyError: If the key is not valid.
        ConfigReadError: If the existing config file cannot be read.
        ConfigParseError: If the existing config file is malformed.
        ConfigWriteError: If the config file cannot be written.
    """
    section, field = parse_config_key(key)
    config = load_config()

    if section == DEFAULT_SECTION:
        config.default_provider = value
    else:
        setattr(config.section(section), field, value)

    save_config(config)


def mask_api_key(api_key: str) -> str:
    """Mask an API key for display.

    Args:
        api_key: The raw API key.

    Returns:
        "[not set]" for an empty key, "****" for keys of 8 chars or fewer,
        otherwise the first and last 4 characters around "...".
    """
    if not api_key:
        return "[not set]"
    if len(api_key) <= 8:
        return "****"
    return api_key[:4] + "..." + api_key[-4:]
