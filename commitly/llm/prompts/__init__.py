"""LLM prompt templates for commit message generation.

- system: The shared system prompt for all backends
- ticket: The ticket-prefixed user prompt and its builder
"""

from commitly.llm.prompts.system import SYSTEM_PROMPT
from commitly.llm.prompts.ticket import (
    COMMIT_TYPES,
    USER_PROMPT_TEMPLATE_TICKET,
    build_user_prompt,
)


__all__ = [
    "SYSTEM_PROMPT",
    "COMMIT_TYPES",
    "USER_PROMPT_TEMPLATE_TICKET",
    "build_user_prompt",
]
