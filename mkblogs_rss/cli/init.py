"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import ConfigModel, default_config_path, save_config

console = Console()


def init_command(
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        help="Where to write the config file",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write a default configuration file."""
    config_path = path or default_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(1)

    save_config(ConfigModel(), config_path)
    console.print(f"[green]✅ Wrote config: {config_path}[/green]")
