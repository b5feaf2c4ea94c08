"""CLI entry point for commitly.

This module provides the main CLI application that combines the default
generate command with the config subcommands.
"""

import typer

from commitly.cli.config import config_app
from commitly.cli.main import main_command

# Main application
app = typer.Typer(
    name="commitly",
    help="commitly: AI-generated conventional commit messages",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
