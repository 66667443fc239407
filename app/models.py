from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------
class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_name: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)


# ---------------------------------------------------------------------------
# News
# ---------------------------------------------------------------------------
class News(Base):
    __tablename__ = "news"

    __table_args__ = (
        # Slider carousel lookup
        Index("ix_news_add_to_slider", "add_to_slider"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(150), nullable=False)
    add_to_slider: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    news_image: Mapped[str] = mapped_column(Text, nullable=False)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )

    # Soft reference: no FK constraint, the category may not exist.
    category_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)

    # lazy="raise" enforces explicit eager loading in services
    category: Mapped[Optional["Category"]] = relationship(
        "Category",
        primaryjoin="foreign(News.category_id) == Category.id",
        lazy="raise",
        viewonly=True,
    )
