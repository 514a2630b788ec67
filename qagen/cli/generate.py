"""Generate and regenerate command implementations."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import Config
from ..generation import (
    GenerationError,
    LLMProvider,
    MockLLMProvider,
    OpenAIProvider,
    QAGenerator,
    QAResult,
    load_qa_json,
    save_qa_json,
    save_qa_result,
)
from ..ranking import ArticleRanker
from .rank import load_cli_config, read_article, resolve_database

console = Console()


def get_llm_provider(config: Config, mock: bool = False) -> LLMProvider:
    """Get configured LLM provider."""
    if mock:
        return MockLLMProvider()

    llm_config = config.get_llm_config()

    if llm_config.get("provider") == "mock":
        return MockLLMProvider()

    if llm_config.get("provider") == "openai":
        api_key = llm_config.get("api_key")
        if not api_key:
            console.print("[yellow]Warning: No OpenAI API key found. Using mock LLM provider.[/yellow]")
            return MockLLMProvider()

        return OpenAIProvider(
            api_key=api_key,
            model=llm_config.get("model", "gpt-4o-mini"),
            base_url=llm_config.get("base_url"),
            temperature=llm_config.get("temperature", 0.7),
        )

    console.print("[yellow]Warning: Unknown LLM provider. Using mock provider.[/yellow]")
    return MockLLMProvider()


def build_generator(config: Config, mock: bool = False) -> QAGenerator:
    """Wire the configured provider and ranker into a generator."""
    provider = get_llm_provider(config, mock)
    model_name = provider.get_usage_stats().get("model", config.config.llm.model)
    return QAGenerator(
        llm_provider=provider,
        ranker=ArticleRanker(config.config.ranking),
        qa_count=config.config.generation.qa_count,
        model_name=model_name,
    )


def print_qa_result(result: QAResult) -> None:
    """Print generated Q&A pairs."""
    table = Table(title="Extended Q&A", show_lines=True)
    table.add_column("#", style="dim")
    table.add_column("Question", style="bold")
    table.add_column("Answer")
    table.add_column("Source", style="cyan")

    for i, pair in enumerate(result.qa_pairs):
        source = pair.source_id
        if pair.source_title:
            source = f"{pair.source_id}\n{pair.source_title}"
        table.add_row(str(i), pair.question, pair.answer, source)

    console.print(table)


def generate_command(
    database: Optional[Path] = typer.Argument(None, help="Article database CSV"),
    article: Optional[Path] = typer.Option(
        None,
        "--article",
        "-a",
        help="File with the new article (default: stdin)",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory for qa.md and qa.json",
    ),
    mock: bool = typer.Option(False, "--mock", help="Use the mock LLM provider"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config file"),
) -> None:
    """Generate extended Q&A pairs for a new article."""
    try:
        config = load_cli_config(config_path)
        loaded = resolve_database(config, database)
        input_article = read_article(article)

        generator = build_generator(config, mock)
        with console.status("Generating extended Q&A..."):
            result, stats = generator.generate(input_article, loaded.articles)

        print_qa_result(result)

        if output_dir is None:
            output_dir = config.output_dir
        markdown_path = output_dir / "qa.md"
        json_path = output_dir / "qa.json"
        save_qa_result(result, markdown_path)
        save_qa_json(result, json_path)

        console.print(Panel(
            f"[green]✅ Generated {len(result.qa_pairs)} Q&A pairs[/green]\n\n"
            f"Related articles: {stats.context_articles}\n"
            f"Tokens: {stats.tokens_used} ({stats.api_calls} calls, {stats.processing_time:.1f}s)\n"
            f"Markdown: {markdown_path}\n"
            f"JSON: {json_path}",
            style="green",
        ))

    except (FileNotFoundError, ValueError, GenerationError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)


def regenerate_command(
    result_file: Path = typer.Argument(..., help="qa.json written by 'qagen generate'"),
    index: int = typer.Argument(..., help="Position of the pair to replace (0-based)"),
    database: Optional[Path] = typer.Argument(None, help="Article database CSV"),
    mock: bool = typer.Option(False, "--mock", help="Use the mock LLM provider"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config file"),
) -> None:
    """Regenerate a single Q&A pair in a saved result."""
    try:
        config = load_cli_config(config_path)
        previous = load_qa_json(result_file)
        loaded = resolve_database(config, database)

        generator = build_generator(config, mock)
        with console.status(f"Regenerating pair {index}..."):
            result = generator.regenerate(previous, index, loaded.articles)

        save_qa_json(result, result_file)
        save_qa_result(result, result_file.with_suffix(".md"))

        print_qa_result(result)
        console.print(f"[green]✅ Replaced pair {index} in {result_file}[/green]")

    except (FileNotFoundError, ValueError, IndexError, GenerationError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
