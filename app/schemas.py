from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# --- News ---

class NewsBase(BaseModel):
    """Field constraints shared by create and by the merged result of an update."""

    title: str = Field(max_length=300)
    content: str
    author: str = Field(max_length=150)
    category_id: int | None = Field(None, alias="category")
    add_to_slider: bool = Field(False, alias="addToSlider")
    model_config = ConfigDict(populate_by_name=True)


class NewsCreate(NewsBase):
    pass


class NewsRecord(NewsBase):
    news_image: str = Field(alias="newsImage", pattern=r"^data:")


class NewsUpdate(BaseModel):
    """Partial update payload.  ``id`` and ``addedAt`` are not accepted."""

    title: str | None = Field(None, max_length=300)
    content: str | None = None
    author: str | None = Field(None, max_length=150)
    category_id: int | None = Field(None, alias="category")
    add_to_slider: bool | None = Field(None, alias="addToSlider")
    news_image: str | None = Field(None, alias="newsImage")
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


# --- Envelope ---

class Envelope(BaseModel):
    success: bool
    msg: str
    data: Any = None
    count: int | None = None
    total_count: int | None = Field(None, serialization_alias="totalCount")
    error: Any = None
