"""Rank command implementation."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import Config, load_config
from ..ingestion import LoadResult, load_articles
from ..ranking import ArticleRanker, print_ranking_summary

console = Console()


def read_article(article: Optional[Path]) -> str:
    """Read the new article from a file, or stdin when no file is given."""
    if article is not None:
        if not article.exists():
            raise FileNotFoundError(f"Article file not found: {article}")
        return article.read_text(encoding="utf-8")
    return sys.stdin.read()


def resolve_database(config: Config, database: Optional[Path]) -> LoadResult:
    """Load the article database given on the command line or in config."""
    if database is None:
        csv_path = config.config.database.csv_path
        if not csv_path:
            raise ValueError("No article database given and none configured")
        database = Path(csv_path).expanduser()

    result = load_articles(database)
    console.print(
        f"[dim]Loaded {result.article_count} articles from {database}"
        + (f" ({result.skipped_rows} empty rows skipped)" if result.skipped_rows else "")
        + "[/dim]"
    )
    return result


def load_cli_config(config_path: Optional[Path]) -> Config:
    """Build the config manager, validating an explicitly given file."""
    if config_path is not None:
        load_config(config_path)
    return Config(config_path)


def rank_command(
    database: Optional[Path] = typer.Argument(None, help="Article database CSV"),
    article: Optional[Path] = typer.Option(
        None,
        "--article",
        "-a",
        help="File with the new article (default: stdin)",
    ),
    top_k: Optional[int] = typer.Option(
        None,
        "--top-k",
        "-k",
        help="Number of related articles to select",
        min=1,
        max=50,
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config file"),
) -> None:
    """Show the archive articles most related to a new article."""
    try:
        config = load_cli_config(config_path)
        loaded = resolve_database(config, database)
        query = read_article(article)

        ranker = ArticleRanker(config.config.ranking)
        result = ranker.score_articles(query, loaded.articles, top_k)
        print_ranking_summary(result)

        if not result.records:
            raise typer.Exit(1)

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
