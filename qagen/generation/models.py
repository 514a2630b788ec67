"""Data models for generation."""

from typing import List

from pydantic import BaseModel, Field

from ..models import QAPair
from ..ranking import ContextRecord


class QAResult(BaseModel):
    """Generated Q&A pairs for one article."""

    input_article: str = Field(..., description="Text of the new article")
    context: List[ContextRecord] = Field(..., description="Related articles sent to the model")
    qa_pairs: List[QAPair] = Field(..., description="Generated Q&A pairs")
    model: str = Field(..., description="Model that produced the pairs")
    generation_timestamp: str = Field(..., description="When pairs were generated")


class GenerationStats(BaseModel):
    """Statistics for generation process."""

    context_articles: int = Field(..., description="Number of related articles used")
    tokens_used: int = Field(0, description="Total tokens used")
    api_calls: int = Field(0, description="Number of API calls made")
    processing_time: float = Field(0.0, description="Processing time in seconds")
