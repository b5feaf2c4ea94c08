"""Git context collector module for commitly.

This package provides:
- exceptions: GitError
- runner: _run_git_command
- diff: get_diff, get_commit_history, DiffSource, GitDiffSource
"""

from commitly.git.exceptions import GitError
from commitly.git.runner import _run_git_command
from commitly.git.diff import (
    DiffSource,
    GitDiffSource,
    get_commit_history,
    get_diff,
)

__all__ = [
    "GitError",
    "_run_git_command",
    "DiffSource",
    "GitDiffSource",
    "get_commit_history",
    "get_diff",
]
