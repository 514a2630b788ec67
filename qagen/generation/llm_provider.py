"""LLM provider interface and implementations."""

import json
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import openai
from openai import OpenAI
from pydantic import ValidationError
from rich.console import Console

from ..models import QAPair

console = Console()

EXTENSION_SOURCE_ID = "本文延伸"


class GenerationError(Exception):
    """Raised when Q&A pairs cannot be generated."""


class NoContextError(GenerationError):
    """Raised when no related articles are available for generation."""


def parse_qa_pairs(raw: str) -> List[QAPair]:
    """
    Parse model output into Q&A pairs.

    Accepts either a JSON array of pairs or an object holding the array
    under ``qa_pairs``.

    Raises:
        GenerationError: If the output is not valid Q&A JSON
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Model returned invalid JSON: {e}")

    if isinstance(data, dict):
        if "qa_pairs" in data:
            data = data["qa_pairs"]
        elif "question" in data:
            data = [data]

    if not isinstance(data, list):
        raise GenerationError("Model output does not contain a list of Q&A pairs")

    try:
        return [QAPair.model_validate(item) for item in data]
    except ValidationError as e:
        raise GenerationError(f"Model returned malformed Q&A pairs: {e}")


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate_qa_pairs(
        self,
        input_article: str,
        context_block: str,
        count: int = 6,
        existing_questions: Optional[List[str]] = None,
    ) -> List[QAPair]:
        """
        Generate extended Q&A pairs for an article.

        Args:
            input_article: Full text of the new article
            context_block: Formatted related articles
            count: Number of pairs to generate
            existing_questions: Questions already written, which new pairs must not repeat

        Returns:
            Generated Q&A pairs
        """
        pass

    @abstractmethod
    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        pass


class OpenAIProvider(LLMProvider):
    """OpenAI implementation of LLM provider."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
        temperature: float = 0.7,
        client: Optional[OpenAI] = None,
    ) -> None:
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Model name to use
            base_url: Custom base URL (for compatible APIs)
            temperature: Sampling temperature
            client: Preconfigured client (for testing)
        """
        self.client = client or OpenAI(api_key=api_key, base_url=base_url)
        self.model = model
        self.temperature = temperature
        self.total_tokens = 0
        self.api_calls = 0

    def _build_prompt(
        self,
        input_article: str,
        context_block: str,
        count: int,
        existing_questions: Optional[List[str]] = None,
    ) -> str:
        """Assemble the user prompt."""
        avoid = ""
        if existing_questions:
            listed = "\n".join(f"- {q}" for q in existing_questions)
            avoid = (
                "\nThese questions have already been written. Take a different angle "
                f"and do not repeat or rephrase any of them:\n{listed}\n"
            )

        return f"""Target article:
{input_article}

Related articles from the archive:
{context_block}

Write {count} extended question and answer pair(s) for readers of the target article.
Cite the archive article each pair draws on by its ID in "sourceId" and its title in "sourceTitle".
For pairs based only on the target article, use "{EXTENSION_SOURCE_ID}" as sourceId.
{avoid}
Respond with a JSON object of the form:
{{"qa_pairs": [{{"question": "...", "answer": "...", "sourceId": "...", "sourceTitle": "..."}}]}}"""

    def generate_qa_pairs(
        self,
        input_article: str,
        context_block: str,
        count: int = 6,
        existing_questions: Optional[List[str]] = None,
    ) -> List[QAPair]:
        """Generate Q&A pairs using OpenAI."""
        prompt = self._build_prompt(input_article, context_block, count, existing_questions)

        try:
            self.api_calls += 1
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as e:
            console.print(f"[red]Error calling model {self.model}: {e}[/red]")
            raise GenerationError(f"Model request failed: {e}") from e

        # Update usage stats
        if response.usage:
            self.total_tokens += response.usage.total_tokens

        content = response.choices[0].message.content
        if not content:
            raise GenerationError(f"Model {self.model} returned an empty response")

        return parse_qa_pairs(content)[:count]

    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        return {
            "total_tokens": self.total_tokens,
            "api_calls": self.api_calls,
            "model": self.model,
        }


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for testing."""

    def __init__(self) -> None:
        """Initialize mock provider."""
        self.calls = []

    def generate_qa_pairs(
        self,
        input_article: str,
        context_block: str,
        count: int = 6,
        existing_questions: Optional[List[str]] = None,
    ) -> List[QAPair]:
        """Mock generation citing the IDs found in the context block."""
        self.calls.append(("generate", count, list(existing_questions or [])))

        source_ids = [
            line.split("ID:", 1)[1].strip()
            for line in context_block.splitlines()
            if "ID:" in line
        ]

        pairs = []
        for i in range(count):
            if i < len(source_ids):
                source_id = f"[{source_ids[i]}]"
            else:
                source_id = EXTENSION_SOURCE_ID
            pairs.append(QAPair(
                question=f"Mock question {len(self.calls)}.{i + 1} about '{input_article[:20]}'",
                answer=f"Mock answer {len(self.calls)}.{i + 1}",
                source_id=source_id,
                source_title="",
            ))
        return pairs

    def get_usage_stats(self) -> Dict:
        """Get mock usage statistics."""
        return {
            "total_tokens": len(self.calls) * 100,
            "api_calls": len(self.calls),
            "model": "mock",
        }
