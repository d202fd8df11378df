"""`entwine config` command: show or change stored settings."""

import typer

from ...config import CONFIG_KEYS, get_config_path, load_config, save_config, set_config_value
from ..app import app


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="show | set"),
    key: str | None = typer.Argument(None, help="Dotted key, e.g. generation.seed"),
    value: str | None = typer.Argument(None, help="New value"),
) -> None:
    """Show or modify configuration."""
    config = load_config()

    if action == "show":
        typer.echo(f"Config file: {get_config_path()}")
        typer.echo("")
        typer.echo("Generation")
        for field, current in config.generation.model_dump().items():
            typer.echo(f"  {field}: {current}")
        typer.echo("")
        typer.echo("Logging")
        for field, current in config.logging.model_dump().items():
            typer.echo(f"  {field}: {current}")
        return

    if action == "set":
        if key is None or value is None:
            typer.echo("Usage: entwine config set KEY VALUE", err=True)
            typer.echo(f"Keys: {', '.join(CONFIG_KEYS)}", err=True)
            raise typer.Exit(1)
        try:
            config = set_config_value(config, key, value)
        except ValueError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(1)
        path = save_config(config)
        typer.echo(f"Set {key} = {value} in {path}")
        return

    typer.echo(f"Unknown action: {action} (expected 'show' or 'set')", err=True)
    raise typer.Exit(1)
