"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .feed import feed_command
from .init import init_command
from .sources import sources_command

app = typer.Typer(
    name="mkrss",
    help="Fetch the latest articles from Mustafif's blogs",
    no_args_is_help=True,
)

# Register commands
app.command("feed")(feed_command)
app.command("sources")(sources_command)
app.command("init")(init_command)


if __name__ == "__main__":
    app()
