"""Main CLI command for generating commit messages."""

from typing import Optional

import click
import typer

from commitly import global_config
from commitly.config import DEFAULT_HISTORY_COUNT, TIMEOUT_ENV_VAR
from commitly.git import GitDiffSource, GitError
from commitly.llm import LLMError, build_user_prompt, generate_commit_message
from commitly.resolution import get_requested_provider, resolve_effective_provider
from commitly.cli.utils import configure_logging, version_callback


def main_command(
    ctx: typer.Context,
    ticket: Optional[str] = typer.Option(
        None,
        "--ticket",
        "-t",
        help="Jira ticket name (prompted for when omitted)",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="Provider to use for this run (overrides AI_PROVIDER and default_provider)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        envvar=TIMEOUT_ENV_VAR,
        click_type=click.FloatRange(min=0, min_open=True),
        help="Request timeout in seconds (defaults to the SDK's own timeout)",
    ),
    history_count: int = typer.Option(
        DEFAULT_HISTORY_COUNT,
        "--history",
        "-n",
        min=1,
        help="Number of previous commit subjects to send",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug information to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a conventional commit message for a Jira ticket from the current changes."""
    configure_logging(verbose)

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    if ticket is None:
        ticket = typer.prompt("Enter the Jira ticket name", default="", show_default=False)
    ticket = ticket.strip()

    try:
        # Step 1: Collect the diff and commit history
        diff_source = GitDiffSource()
        diff = diff_source.diff()
        history = diff_source.history(history_count)

        # Step 2: Build the prompt
        prompt = build_user_prompt(ticket, diff, history)

        # Step 3: Resolve backend and model from the config
        config = global_config.load_config()
        requested = get_requested_provider(config, override=provider)
        effective = resolve_effective_provider(requested, config)

        # Step 4: Generate
        message = generate_commit_message(prompt, effective, config, timeout=timeout)

    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"Error generating commit message: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("")
    typer.echo("Generated commit message:")
    typer.echo(message)
