"""Ticket-prefixed prompt template for LLM commit message generation.

The ticket key entered by the user becomes the conventional-commit scope,
e.g. ``feat(PROJ-123): Add login endpoint``.
"""

COMMIT_TYPES = ("feat", "fix", "docs", "style", "refactor", "test", "chore")

USER_PROMPT_TEMPLATE_TICKET = """Generate a commit message for Jira ticket '{ticket}' following this exact format:
<type>({ticket}): <title>

Changes:
- <first change>
- <second change>
- <additional changes if needed>

Where:
- <type> should be one of: {commit_types}
- ({ticket}) is the Jira ticket number
- <title> is a concise description
- Changes section should list the main modifications as bullet points

Example title: feat({ticket}): Add user login endpoint

The diff of changes is:
{diff}

The history of previous commit messages is:
{history}

Provide a commit message that follows this format strictly, with bullet points for changes."""


def build_user_prompt(ticket: str, diff: str, history: str) -> str:
    """Build the user prompt from the ticket, diff and commit history.

    Empty inputs are not rejected; they produce a well-formed prompt with
    empty sections.

    Args:
        ticket: The ticket key, e.g. PROJ-123.
        diff: The diff text to describe.
        history: Previous commit subjects, one per line.

    Returns:
        The formatted user prompt.
    """
    return USER_PROMPT_TEMPLATE_TICKET.format(
        ticket=ticket,
        diff=diff,
        history=history,
        commit_types=", ".join(COMMIT_TYPES),
    )
