"""CLI commands for configuration management."""

from typing import Optional

import typer

from commitly import global_config
from commitly.config import DEFAULT_MODELS, DISPLAY_NAMES, Backend, get_api_key_env_var

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage commitly configuration in ~/.commitly.json",
    add_completion=False,
)

SET_USAGE = """Usage: commitly config set <key> <value>
Example: commitly config set openai.api_key sk-xxxxxxx
Example: commitly config set openai.provider claude
Example: commitly config set openai.model gpt-4-turbo"""

GET_USAGE = """Usage: commitly config get <key>
Example: commitly config get openai.api_key"""


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    """Manage commitly configuration in ~/.commitly.json"""
    if ctx.invoked_subcommand is None:
        typer.echo("Usage: commitly config <command>")
        typer.echo("Available commands: set, get, show, list-providers")


@config_app.command("set")
def config_set(
    key: Optional[str] = typer.Argument(None, help="Config key in section.field form"),
    value: Optional[str] = typer.Argument(None, help="Value to store"),
) -> None:
    """Set one configuration value."""
    if key is None or value is None:
        typer.echo(SET_USAGE)
        raise typer.Exit(1)

    try:
        global_config.set_value(key, value)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error setting config: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Config {key} set successfully")


@config_app.command("get")
def config_get(
    key: Optional[str] = typer.Argument(None, help="Config key in section.field form"),
) -> None:
    """Print one configuration value."""
    if key is None:
        typer.echo(GET_USAGE)
        raise typer.Exit(1)

    try:
        value = global_config.get_value(key)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error getting config: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"{key} = {value}")


@config_app.command("show")
def config_show() -> None:
    """Show the current configuration with API keys masked."""
    try:
        config = global_config.load_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Current configuration:")
    typer.echo("---------------------")
    typer.echo(f"Default Provider: {config.default_provider}")

    for backend in Backend:
        section = config.section(backend.value)
        typer.echo()
        typer.echo(f"{DISPLAY_NAMES[backend]} Configuration:")
        typer.echo(f"  Provider: {section.provider}")
        typer.echo(f"  Model: {section.model}")
        typer.echo(f"  API Key: {global_config.mask_api_key(section.api_key)}")

    if not global_config.is_configured():
        typer.echo()
        typer.echo(f"(defaults, {global_config.get_config_file_path()} not written yet)")


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List the supported LLM backends."""
    typer.echo("Available LLM providers:")
    typer.echo()
    for backend in Backend:
        typer.echo(
            f"  • {backend.value} (default model: {DEFAULT_MODELS[backend]}, "
            f"key: {get_api_key_env_var(backend)})"
        )
    typer.echo()
    typer.echo("Redirect a provider slot with 'commitly config set <slot>.provider <backend>'.")
