"""Article database loading from CSV files."""

import warnings
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd
from rich.console import Console

from ..models import Article
from .models import LoadResult

console = Console()

CORE_COLUMNS = ("id", "title", "content")


def _normalize_column(name: str) -> str:
    """Trim a header cell and lower-case it."""
    return str(name).strip().lstrip("\ufeff").lower()


def _row_to_article(row: Dict[str, str], mapping: Dict[str, str]) -> Article:
    """Split a CSV row into core fields and extras."""
    core = {field: row.get(column, "").strip() for field, column in mapping.items()}
    extras = {
        column: value
        for column, value in row.items()
        if column not in mapping.values() and value != ""
    }
    return Article(**core, extras=extras)


def load_articles(path: Union[str, Path]) -> LoadResult:
    """
    Load an article database from a CSV file.

    Args:
        path: CSV file with a header row containing id, title and content columns

    Returns:
        Load result with parsed articles

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty or cannot be parsed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Article database not found: {path}")

    try:
        # index_col=False keeps columns aligned to the header when a row has
        # extra fields; pandas drops the overflow and emits a ParserWarning.
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", pd.errors.ParserWarning)
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8-sig",
                engine="python",
                index_col=False,
            )
    except pd.errors.EmptyDataError:
        raise ValueError(f"Article database has no header row: {path}")
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not parse article database {path}: {e}")

    parser_warnings = [
        str(w.message) for w in caught if issubclass(w.category, pd.errors.ParserWarning)
    ]
    for message in parser_warnings:
        console.print(f"[yellow]Warning: {path.name}: {message}[/yellow]")

    df = df.fillna("")

    columns = [str(c) for c in df.columns]
    mapping = {}
    for column in columns:
        key = _normalize_column(column)
        if key in CORE_COLUMNS and key not in mapping:
            mapping[key] = column

    missing = [c for c in CORE_COLUMNS if c not in mapping]
    if missing:
        console.print(
            f"[yellow]Warning: {path.name} has no {', '.join(missing)} column(s); "
            f"those fields will be empty.[/yellow]"
        )

    articles: List[Article] = []
    skipped = 0
    for row in df.to_dict(orient="records"):
        row = {str(k): str(v) for k, v in row.items()}
        if not any(v.strip() for v in row.values()):
            skipped += 1
            continue
        articles.append(_row_to_article(row, mapping))

    return LoadResult(
        source_path=str(path),
        articles=articles,
        columns=columns,
        skipped_rows=skipped,
        parser_warnings=parser_warnings,
    )
