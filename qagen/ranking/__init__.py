"""Article retrieval and ranking."""

from .models import ContextRecord, RankingResult, ScoredCandidate
from .ranker import (
    MISSING_ID,
    MISSING_TITLE,
    ArticleRanker,
    find_relevant_articles,
    print_ranking_summary,
)
from .scorers import BaseScorer, BigramScorer, get_bigrams, normalize_query

__all__ = [
    "ArticleRanker",
    "MISSING_ID",
    "MISSING_TITLE",
    "BaseScorer",
    "BigramScorer",
    "ContextRecord",
    "RankingResult",
    "ScoredCandidate",
    "find_relevant_articles",
    "get_bigrams",
    "normalize_query",
    "print_ranking_summary",
]
