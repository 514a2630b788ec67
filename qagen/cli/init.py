"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import DEFAULT_CONFIG_PATH, ConfigModel, save_config

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_PATH.parent,
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    database: Optional[Path] = typer.Option(
        None,
        "--database",
        "-d",
        help="Default article database CSV",
    ),
    model: str = typer.Option("gpt-4o-mini", "--model", help="LLM model name"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Write a default configuration file."""
    config_path = config_dir / "config.yaml"

    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path} (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    config = ConfigModel(
        database={"csv_path": str(database.expanduser()) if database else None},
        llm={"model": model},
    )

    save_config(config, config_path)

    console.print(
        Panel(
            f"[green]✅ Created config: {config_path}[/green]\n\n"
            f"Next steps:\n"
            f"1. Set LLM API key: [bold]export {config.llm.api_key_env}=your_key[/bold]\n"
            f"2. Run: [bold]qagen generate articles.csv --article new_article.txt[/bold]",
            style="green",
        )
    )
