"""Extended Q&A generation."""

from .llm_provider import (
    GenerationError,
    LLMProvider,
    MockLLMProvider,
    NoContextError,
    OpenAIProvider,
    parse_qa_pairs,
)
from .models import GenerationStats, QAResult
from .qa_generator import (
    QAGenerator,
    format_as_markdown,
    format_context,
    load_qa_json,
    resolve_source,
    save_qa_json,
    save_qa_result,
)

__all__ = [
    "GenerationError",
    "GenerationStats",
    "LLMProvider",
    "MockLLMProvider",
    "NoContextError",
    "OpenAIProvider",
    "QAGenerator",
    "QAResult",
    "format_as_markdown",
    "format_context",
    "load_qa_json",
    "parse_qa_pairs",
    "resolve_source",
    "save_qa_json",
    "save_qa_result",
]
