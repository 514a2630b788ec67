"""Article ranker that selects related articles for a new article."""

from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from ..config import RankingConfig
from ..models import Article
from .models import ContextRecord, RankingResult, ScoredCandidate
from .scorers import BigramScorer, get_bigrams

console = Console()

MISSING_ID = "N/A"
MISSING_TITLE = "no title"


class ArticleRanker:
    """Rank database articles by bigram overlap with a query."""

    def __init__(self, config: Optional[RankingConfig] = None) -> None:
        """
        Initialize article ranker.

        Args:
            config: Ranking configuration, defaults when omitted
        """
        self.config = config or RankingConfig()
        self.scorer = BigramScorer()

    def _candidates(self, articles: Sequence[Article]) -> tuple[List[Article], bool]:
        """Apply the content length gate, falling back to every article."""
        valid = [
            article for article in articles
            if article.content and len(article.content) > self.config.min_content_length
        ]
        if valid:
            return valid, False
        return list(articles), True

    def _to_record(self, article: Article) -> ContextRecord:
        """Project an article into a truncated context record."""
        return ContextRecord(
            id=article.id or MISSING_ID,
            title=article.title or MISSING_TITLE,
            content=(article.content or "")[:self.config.max_context_chars],
        )

    def score_articles(
        self,
        query: str,
        articles: Sequence[Article],
        top_k: Optional[int] = None,
    ) -> RankingResult:
        """
        Score and order articles against a query.

        Args:
            query: Text of the new article
            articles: Article database
            top_k: Number of records to select (config default when omitted)

        Returns:
            Ranking result with every scored candidate and the top K records
        """
        if top_k is None:
            top_k = self.config.top_k

        if not articles:
            return RankingResult(total_articles=0, candidates_considered=0)

        candidates, used_fallback = self._candidates(articles)
        bigrams = get_bigrams(query) if query else set()

        scored = [
            ScoredCandidate(
                article=article,
                score=self.scorer.score_bigrams(bigrams, article),
            )
            for article in candidates
        ]

        # sorted() is stable, so equal scores keep database order.
        scored = sorted(scored, key=lambda x: x.score, reverse=True)

        selected = scored[:max(top_k, 0)]

        return RankingResult(
            total_articles=len(articles),
            candidates_considered=len(candidates),
            used_fallback=used_fallback,
            query_bigrams=len(bigrams),
            scored=scored,
            records=[self._to_record(item.article) for item in selected],
        )

    def rank(
        self,
        query: str,
        articles: Sequence[Article],
        top_k: Optional[int] = None,
    ) -> List[ContextRecord]:
        """Return up to top K context records, most relevant first."""
        return self.score_articles(query, articles, top_k).records


def find_relevant_articles(
    query: str,
    articles: Sequence[Article],
    top_k: int = 5,
) -> List[ContextRecord]:
    """Rank articles with the default configuration."""
    return ArticleRanker().rank(query, articles, top_k)


def print_ranking_summary(result: RankingResult, limit: Optional[int] = None) -> None:
    """Print ranking summary. Every selected record is listed unless limit is given."""
    console.print(f"\n[bold]Ranking Summary:[/bold]")
    console.print(f"  Total articles: {result.total_articles}")
    console.print(f"  Candidates scored: {result.candidates_considered}")
    console.print(f"  Query bigrams: {result.query_bigrams}")
    if result.used_fallback:
        console.print(
            "  [yellow]No article passed the content length gate; "
            "scored the full database instead.[/yellow]"
        )

    if not result.records:
        console.print("[yellow]No related articles found.[/yellow]")
        return

    table = Table(title="Related Articles")
    table.add_column("#", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="yellow")
    table.add_column("Score", style="green", justify="right")

    records = result.records if limit is None else result.records[:limit]
    for i, (record, item) in enumerate(zip(records, result.scored), 1):
        table.add_row(str(i), record.id, record.title, str(item.score))

    console.print(table)
