"""Q&A pair model."""

from pydantic import BaseModel, ConfigDict, Field


class QAPair(BaseModel):
    """Single extended question and answer."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(..., description="Question text")
    answer: str = Field(..., description="Answer text")
    source_id: str = Field("", alias="sourceId", description="ID of the cited article")
    source_title: str = Field("", alias="sourceTitle", description="Title of the cited article")
