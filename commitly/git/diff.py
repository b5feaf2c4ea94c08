"""Git diff and history collection.

Contains:
- get_diff: Diff of the last stash, or of the working tree when there is none
- get_commit_history: Subjects of the last n commits
- DiffSource: The interface the CLI depends on
- GitDiffSource: DiffSource backed by the git executable
"""

import logging
from typing import Protocol

from commitly.config import DEFAULT_HISTORY_COUNT
from commitly.git.exceptions import GitError
from commitly.git.runner import _run_git_command

logger = logging.getLogger(__name__)


def get_diff() -> str:
    """Get the diff of changes to describe.

    Uses the patch of the most recent stash. When there is no stash, or the
    stash lookup fails for any reason, falls back to plain ``git diff``.

    Returns:
        The diff text (may be empty).

    Raises:
        GitError: If ``git diff`` itself fails.
    """
    try:
        stash_diff = _run_git_command(["stash", "show", "-p"])
    except GitError as e:
        logger.debug("Stash lookup failed, falling back to git diff: %s", e)
        stash_diff = ""

    if stash_diff:
        return stash_diff

    return _run_git_command(["diff"])


def get_commit_history(n: int = DEFAULT_HISTORY_COUNT) -> str:
    """Get the subjects of the last n commits.

    Args:
        n: Number of commits to retrieve.

    Returns:
        Commit subjects, one per line.

    Raises:
        GitError: If ``git log`` fails.
    """
    return _run_git_command(["log", "--pretty=format:%s", "-n", str(n)])


class DiffSource(Protocol):
    """Supplies the diff and commit history sent to the LLM."""

    def diff(self) -> str:
        ...

    def history(self, n: int = DEFAULT_HISTORY_COUNT) -> str:
        ...


class GitDiffSource:
    """DiffSource that shells out to git in the current directory."""

    def diff(self) -> str:
        return get_diff()

    def history(self, n: int = DEFAULT_HISTORY_COUNT) -> str:
        return get_commit_history(n)
