"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .articles import (
    articles_command,
    enrich_all_command,
    enrich_command,
    refresh_command,
    simplify_command,
)
from .classify import classify_command
from .init import init_command
from .verify import verify_command

app = typer.Typer(
    name="healthfeed",
    help="Health News Feed - categorized headlines with AI summaries",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("articles")(articles_command)
app.command("refresh")(refresh_command)
app.command("enrich")(enrich_command)
app.command("enrich-all")(enrich_all_command)
app.command("simplify")(simplify_command)
app.command("classify")(classify_command)
app.command("verify")(verify_command)


if __name__ == "__main__":
    app()
