"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .generate import generate_command, regenerate_command
from .init import init_command
from .rank import rank_command

app = typer.Typer(
    name="qagen",
    help="Extended Q&A Generator - related article retrieval and Q&A drafting",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("rank")(rank_command)
app.command("generate")(generate_command)
app.command("regenerate")(regenerate_command)


if __name__ == "__main__":
    app()
