"""Sources command implementation."""

from rich.console import Console
from rich.table import Table

from ..ingestion import SOURCE_FILTERS
from ..models import SOURCE_URLS, Source

console = Console()


def sources_command() -> None:
    """List the configured sources."""
    table = Table(title="Configured Sources")
    table.add_column("Source", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Filter", style="yellow")
    table.add_column("URL", style="blue")

    for source in Source:
        policy = SOURCE_FILTERS.get(source)
        table.add_row(
            source.value,
            source.display_name,
            policy.__name__ if policy else "all",
            SOURCE_URLS[source],
        )

    console.print(table)
