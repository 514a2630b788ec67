"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """Article database configuration."""

    csv_path: Optional[str] = Field(None, description="Default article database CSV")


class RankingConfig(BaseModel):
    """Ranking configuration."""

    top_k: int = Field(5, description="Related articles passed to the model", ge=1, le=50)
    min_content_length: int = Field(
        20,
        description="Articles with content at or below this length are skipped unless nothing else is left",
        ge=0,
    )
    max_context_chars: int = Field(
        500,
        description="Characters of article content kept per context record",
        ge=1,
        le=500,
    )


class GenerationConfig(BaseModel):
    """Q&A generation parameters."""

    qa_count: int = Field(6, description="Q&A pairs generated per article", ge=1, le=20)
    output_dir: str = Field("~/qagen-output", description="Directory for saved results")


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = Field("openai", description="LLM provider (openai, mock)")
    model: str = Field("gpt-4o-mini", description="Model name")
    api_key_env: Optional[str] = Field("OPENAI_API_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    base_url: Optional[str] = Field(None, description="Base URL for an OpenAI compatible API")
    temperature: float = Field(0.7, ge=0.0, le=2.0)


class ConfigModel(BaseModel):
    """Main configuration model."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
