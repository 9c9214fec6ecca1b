"""Feed command implementation."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Config
from ..errors import FeedError
from ..ingestion import feed_sync
from ..logging_config import setup_logging
from ..models import Source, rss_map_to_dict

console = Console()


def feed_command(
    source: Optional[Source] = typer.Option(
        None,
        "--source",
        "-s",
        help="Only print this source",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the article mapping as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Fetch every blog and print its articles."""
    try:
        config = Config().config
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    setup_logging(config.log_level, verbose=verbose)

    try:
        rss_map = feed_sync(config.fetch)
    except FeedError as e:
        console.print(f"[red]Feed failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if source is not None:
        rss_map = {source: rss_map[source]}

    if as_json:
        typer.echo(json.dumps(rss_map_to_dict(rss_map), indent=2))
        return

    for src, articles in rss_map.items():
        console.print(f"[bold]{src.display_name}[/bold]")
        if not articles:
            console.print("  [dim]No articles[/dim]")
        for article in articles:
            console.print(f"- {article.title}", markup=False)
