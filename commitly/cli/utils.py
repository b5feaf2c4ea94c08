"""Shared utility functions for CLI commands."""

import logging

import typer

from commitly import __version__

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Configure root logging for the CLI.

    Args:
        verbose: Log debug records to stderr when True, warnings only otherwise.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def version_callback(value: bool) -> None:
    """Print the version and exit when --version is given."""
    if value:
        typer.echo(f"commitly {__version__}")
        raise typer.Exit()
