"""Article model for records loaded from the article database."""

from typing import Dict

from pydantic import BaseModel, Field


class Article(BaseModel):
    """Historical article.

    Only ``id``, ``title`` and ``content`` take part in retrieval. Any other
    column from the source file is kept in ``extras``.
    """

    id: str = Field("", description="Article identifier")
    title: str = Field("", description="Article title")
    content: str = Field("", description="Article body used for retrieval")
    extras: Dict[str, str] = Field(
        default_factory=dict,
        description="Additional columns from the source file",
    )
