"""Static configuration for commitly LLM backends.

User settings live in ~/.commitly.json and are handled by
commitly.global_config. This module only holds the fixed backend set and
the values that never change at runtime.
"""

from enum import Enum


class Backend(str, Enum):
    """Supported LLM backends."""

    OPENAI = "openai"
    CLAUDE = "claude"
    DEEPSEEK = "deepseek"
    GEMINI = "gemini"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_BACKEND = Backend.OPENAI

DEFAULT_MODELS = {
    Backend.OPENAI: "gpt-4o",
    Backend.CLAUDE: "claude-3-5-sonnet-20241022",
    Backend.DEEPSEEK: "deepseek-chat",
    Backend.GEMINI: "gemini-1.5-flash-latest",
}

# Human-readable backend names for messages and `config show`
DISPLAY_NAMES = {
    Backend.OPENAI: "OpenAI",
    Backend.CLAUDE: "Claude",
    Backend.DEEPSEEK: "Deepseek",
    Backend.GEMINI: "Gemini",
}

# Request parameters shared by all backends
TEMPERATURE = 0.7
MAX_TOKENS = 1000

# Number of previous commit subjects sent as style reference
DEFAULT_HISTORY_COUNT = 10


# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

PROVIDER_ENV_VAR = "AI_PROVIDER"
TIMEOUT_ENV_VAR = "COMMITLY_TIMEOUT"

API_KEY_ENV_VARS = {
    Backend.OPENAI: "OPENAI_API_KEY",
    Backend.CLAUDE: "ANTHROPIC_API_KEY",
    Backend.DEEPSEEK: "DEEPSEEK_API_KEY",
    Backend.GEMINI: "GEMINI_API_KEY",
}

# Example key shown in setup instructions
API_KEY_EXAMPLES = {
    Backend.OPENAI: "sk-xxxxxxx",
    Backend.CLAUDE: "sk-ant-xxxxxxx",
    Backend.DEEPSEEK: "xxxxxxx",
    Backend.GEMINI: "xxxxxxx",
}


def get_api_key_env_var(backend: Backend) -> str:
    """Get the environment variable name for the API key.

    Args:
        backend: The LLM backend.

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[backend]
