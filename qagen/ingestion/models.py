"""Data models for ingestion."""

from typing import List

from pydantic import BaseModel, Field

from ..models import Article


class LoadResult(BaseModel):
    """Result of loading an article database."""

    source_path: str = Field(..., description="File the articles were read from")
    articles: List[Article] = Field(default_factory=list, description="Loaded articles")
    columns: List[str] = Field(default_factory=list, description="Header columns as found in the file")
    skipped_rows: int = Field(0, description="Rows skipped because every cell was empty")
    parser_warnings: List[str] = Field(
        default_factory=list,
        description="Parser warnings, such as rows with more fields than the header",
    )

    @property
    def article_count(self) -> int:
        """Number of loaded articles."""
        return len(self.articles)
