"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .init import init_command
from .outlets import outlets_app
from .trending import trending_app

app = typer.Typer(
    name="newslens",
    help="newslens - Trending stories across news outlets",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.add_typer(trending_app, name="trending", help="Detect and browse trending stories")
app.add_typer(outlets_app, name="outlets", help="Manage news outlets")


if __name__ == "__main__":
    app()
