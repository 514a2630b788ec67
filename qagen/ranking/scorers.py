"""Bigram overlap scoring for article retrieval."""

import re
from abc import ABC, abstractmethod
from typing import Set

from ..models import Article

# ASCII word characters and CJK unified ideographs survive normalization.
_NON_WORD = re.compile(r"[^A-Za-z0-9_\u4e00-\u9fa5]+")


def normalize_query(text: str) -> str:
    """Strip punctuation, whitespace and non-CJK symbols, then lower-case."""
    if not text:
        return ""
    return _NON_WORD.sub("", text).lower()


def get_bigrams(text: str) -> Set[str]:
    """
    Build the set of overlapping 2-character substrings of normalized text.

    Args:
        text: Raw query text

    Returns:
        Distinct bigrams, empty when fewer than 2 characters remain
    """
    clean = normalize_query(text)
    return {clean[i:i + 2] for i in range(len(clean) - 1)}


class BaseScorer(ABC):
    """Base class for scoring components."""

    @abstractmethod
    def score(self, query: str, article: Article) -> int:
        """
        Score an article against a query.

        Args:
            query: Query text
            article: Candidate article

        Returns:
            Non-negative relevance score
        """
        pass


class BigramScorer(BaseScorer):
    """Count the distinct query bigrams present in an article."""

    def score(self, query: str, article: Article) -> int:
        """Score by bigram containment in title and content."""
        if not query or not article.content:
            return 0
        return self.score_bigrams(get_bigrams(query), article)

    def score_bigrams(self, bigrams: Set[str], article: Article) -> int:
        """Score against an already computed bigram set."""
        if not bigrams or not article.content:
            return 0

        # Document text is only lower-cased, never normalized like the query.
        text = (article.title + article.content).lower()
        return sum(1 for gram in bigrams if gram in text)
