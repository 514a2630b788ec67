"""Extended Q&A generator."""

import re
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pendulum

from ..models import Article, QAPair
from ..ranking import MISSING_TITLE, ArticleRanker, ContextRecord
from .llm_provider import GenerationError, LLMProvider, NoContextError
from .models import GenerationStats, QAResult

CONTEXT_DIVIDER = "\n----------------\n"

_ID_PREFIX = re.compile(r"^id:\s*", re.IGNORECASE)


def format_context(records: Sequence[ContextRecord]) -> str:
    """Join context records into the block sent to the model."""
    blocks = [
        f"[Article {i}] ID: {record.id}\nTitle: {record.title}\nExcerpt: {record.content}\n"
        for i, record in enumerate(records, 1)
    ]
    return CONTEXT_DIVIDER.join(blocks)


def is_extension(pair: QAPair) -> bool:
    """Whether a pair draws on the input article rather than the archive."""
    return "本文" in pair.source_id


def resolve_source(pair: QAPair, articles: Sequence[Article]) -> QAPair:
    """
    Map a model-cited source ID back to the database article.

    The model may wrap IDs in brackets or prefix them with ``ID:``. When the
    cleaned ID matches an article, the article's exact title replaces the one
    the model wrote. Unknown IDs are left as they are.
    """
    if is_extension(pair):
        return pair

    clean_id = pair.source_id.replace("[", "").replace("]", "")
    clean_id = _ID_PREFIX.sub("", clean_id).strip()

    for article in articles:
        if article.id == clean_id:
            return pair.model_copy(update={
                "source_id": clean_id,
                "source_title": article.title or MISSING_TITLE,
            })

    return pair


class QAGenerator:
    """Generate extended Q&A pairs grounded in related archive articles."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        ranker: Optional[ArticleRanker] = None,
        qa_count: int = 6,
        model_name: str = "unknown",
    ) -> None:
        """
        Initialize Q&A generator.

        Args:
            llm_provider: LLM provider for generation
            ranker: Article ranker used to select context
            qa_count: Number of pairs per article
            model_name: Model name recorded in results
        """
        self.llm_provider = llm_provider
        self.ranker = ranker or ArticleRanker()
        self.qa_count = qa_count
        self.model_name = model_name

    def _find_context(self, input_article: str, articles: Sequence[Article]) -> List[ContextRecord]:
        """Rank the database and refuse to continue without context."""
        if not input_article.strip():
            raise ValueError("Input article is empty")
        if not articles:
            raise NoContextError("Article database is empty")

        context = self.ranker.rank(input_article, articles)
        if not context:
            raise NoContextError("No related articles found in the database")
        return context

    def generate(
        self,
        input_article: str,
        articles: Sequence[Article],
    ) -> Tuple[QAResult, GenerationStats]:
        """
        Generate Q&A pairs for an article.

        Returns:
            Tuple of (qa_result, generation_stats)
        """
        start_time = time.time()

        context = self._find_context(input_article, articles)
        pairs = self.llm_provider.generate_qa_pairs(
            input_article=input_article,
            context_block=format_context(context),
            count=self.qa_count,
        )

        result = QAResult(
            input_article=input_article,
            context=context,
            qa_pairs=[resolve_source(pair, articles) for pair in pairs],
            model=self.model_name,
            generation_timestamp=pendulum.now().to_iso8601_string(),
        )

        llm_stats = self.llm_provider.get_usage_stats()
        stats = GenerationStats(
            context_articles=len(context),
            tokens_used=llm_stats.get("total_tokens", 0),
            api_calls=llm_stats.get("api_calls", 0),
            processing_time=time.time() - start_time,
        )

        return result, stats

    def regenerate(
        self,
        result: QAResult,
        index: int,
        articles: Sequence[Article],
    ) -> QAResult:
        """
        Replace a single Q&A pair with a freshly generated one.

        Raises:
            IndexError: If index does not address an existing pair
            GenerationError: If the model returns no new pair
        """
        if not 0 <= index < len(result.qa_pairs):
            raise IndexError(f"No Q&A pair at position {index}")

        existing = [pair.question for pair in result.qa_pairs]
        context = self._find_context(result.input_article, articles)
        pairs = self.llm_provider.generate_qa_pairs(
            input_article=result.input_article,
            context_block=format_context(context),
            count=1,
            existing_questions=existing,
        )

        seen = {q.strip() for q in existing}
        fresh = [pair for pair in pairs if pair.question.strip() not in seen]
        if not fresh:
            raise GenerationError("Model returned no new replacement pair")

        qa_pairs = list(result.qa_pairs)
        qa_pairs[index] = resolve_source(fresh[0], articles)

        return result.model_copy(update={
            "context": context,
            "qa_pairs": qa_pairs,
            "generation_timestamp": pendulum.now().to_iso8601_string(),
        })


def format_as_markdown(result: QAResult) -> str:
    """Format Q&A result as Markdown."""
    lines = []

    lines.append("# Extended Q&A")
    lines.append("")
    lines.append(
        f"*Generated on {pendulum.parse(result.generation_timestamp).format('MMM DD, YYYY [at] HH:mm')} "
        f"with {result.model}*"
    )
    lines.append("")

    for i, pair in enumerate(result.qa_pairs, 1):
        lines.append(f"## Q{i}. {pair.question}")
        lines.append("")
        lines.append(pair.answer)
        lines.append("")
        if is_extension(pair):
            lines.append("*Source: extension of the input article*")
        else:
            lines.append(f"*Source: [{pair.source_id}] {pair.source_title}*")
        lines.append("")

    lines.append("---")
    lines.append("")
    lines.append("## Related Articles")
    lines.append("")
    for record in result.context:
        lines.append(f"- [{record.id}] {record.title}")
    lines.append("")

    return "\n".join(lines)


def save_qa_result(result: QAResult, output_path: Path) -> None:
    """Save Q&A result to markdown file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(format_as_markdown(result), encoding="utf-8")


def save_qa_json(result: QAResult, output_path: Path) -> None:
    """Save Q&A result as JSON for later regeneration."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.model_dump_json(indent=2), encoding="utf-8")


def load_qa_json(path: Path) -> QAResult:
    """Load a Q&A result saved by save_qa_json."""
    if not path.exists():
        raise FileNotFoundError(f"Result file not found: {path}")
    return QAResult.model_validate_json(path.read_text(encoding="utf-8"))
