"""Ranking models."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..models import Article

MAX_CONTEXT_CHARS = 500


class ContextRecord(BaseModel):
    """Reduced projection of an article passed to the generation step."""

    id: str = Field(..., description="Article identifier")
    title: str = Field(..., description="Article title")
    content: str = Field(
        ...,
        description="Article content truncated for the prompt",
        max_length=MAX_CONTEXT_CHARS,
    )


class ScoredCandidate(BaseModel):
    """Article paired with its bigram overlap score."""

    model_config = ConfigDict(frozen=True)

    article: Article = Field(..., description="Candidate article")
    score: int = Field(..., description="Number of query bigrams found", ge=0)


class RankingResult(BaseModel):
    """Result of ranking articles against a query."""

    total_articles: int = Field(..., description="Articles supplied by the caller")
    candidates_considered: int = Field(..., description="Articles that were scored")
    used_fallback: bool = Field(
        False,
        description="Whether the content filter removed everything and all articles were scored",
    )
    query_bigrams: int = Field(0, description="Distinct bigrams in the normalized query")
    scored: List[ScoredCandidate] = Field(
        default_factory=list,
        description="All scored candidates, best first",
    )
    records: List[ContextRecord] = Field(
        default_factory=list,
        description="Top K context records",
    )
