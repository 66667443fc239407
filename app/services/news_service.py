"""
News service: business logic for the News aggregate.

Design notes
------------
- Every read expands the soft ``category`` reference with
  ``selectinload``; the relationship is ``lazy="raise"`` so an implicit
  load fails instead of issuing a hidden query.
- Re-reads after a write use ``populate_existing`` so the instance
  already sitting in the identity map picks up the freshly loaded
  category.
- Identifiers arrive as raw query strings.  A malformed id behaves
  exactly like an unknown one (``None`` / empty result).
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` dependency in the router layer.
"""
from datetime import datetime, timezone

from fastapi import UploadFile
from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.errors import InvalidArgument
from app.image_encoder import encode_upload, to_data_uri
from app.models import Category, News
from app.schemas import NewsCreate, NewsRecord, NewsUpdate

# ORM attributes an update may touch, keyed by NewsUpdate field name.
_UPDATABLE_FIELDS: frozenset[str] = frozenset(
    {"title", "content", "author", "category_id", "add_to_slider", "news_image"}
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def parse_id(raw: str | int | None) -> int | None:
    """Return *raw* as a positive integer id, or None if it is not one."""
    if isinstance(raw, int):
        return raw if raw > 0 else None
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def _category_to_dict(category: Category | None) -> dict | None:
    if category is None:
        return None
    return {"id": category.id, "category_name": category.category_name}


def _news_to_dict(news: News) -> dict:
    """Serialise a News ORM instance to the camelCase wire shape."""
    return {
        "id": news.id,
        "title": news.title,
        "content": news.content,
        "author": news.author,
        "category": _category_to_dict(news.category),
        "addToSlider": news.add_to_slider,
        "newsImage": news.news_image,
        "addedAt": news.added_at.isoformat() if news.added_at else None,
    }


async def _fetch_one(db: AsyncSession, news_id: int) -> News | None:
    q = (
        select(News)
        .where(News.id == news_id)
        .options(selectinload(News.category))
        .execution_options(populate_existing=True)
    )
    result = await db.execute(q)
    return result.scalar_one_or_none()


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def create_news(db: AsyncSession, data: NewsCreate, image: UploadFile) -> dict | None:
    """
    Encode *image* into a data-URI and insert a new News row.

    ``addedAt`` is stamped here and never touched again.  Returns None
    when the row cannot be read back after the insert.
    """
    content_type, encoded = await encode_upload(image)
    news = News(
        title=data.title,
        content=data.content,
        author=data.author,
        category_id=data.category_id,
        add_to_slider=data.add_to_slider,
        news_image=to_data_uri(content_type, encoded),
        added_at=datetime.now(timezone.utc),
    )
    db.add(news)
    await db.flush()

    created = await _fetch_one(db, news.id)
    return _news_to_dict(created) if created is not None else None


async def list_news(db: AsyncSession, page_no: int, page_limit: int) -> tuple[list[dict], int]:
    """
    Return one page of news, newest first, plus the total row count.

    Raises ``InvalidArgument`` for ``page_no <= 0`` before any query is
    issued.  Ties on ``added_at`` fall back to ascending id so repeated
    calls on unchanged data return identical pages.  A page starting at
    or past the last row is empty and never reaches the OFFSET query,
    whose integer may be far larger than the driver accepts.
    """
    if page_no <= 0:
        raise InvalidArgument()

    skip = page_limit * (page_no - 1)

    total: int = (await db.execute(select(func.count()).select_from(News))).scalar_one()
    if skip >= total:
        return [], total

    q = (
        select(News)
        .options(selectinload(News.category))
        .order_by(desc(News.added_at), asc(News.id))
        .execution_options(populate_existing=True)
        .offset(skip)
        .limit(page_limit)
    )
    result = await db.execute(q)
    return [_news_to_dict(n) for n in result.scalars().all()], total


async def get_news(db: AsyncSession, raw_id: str | int) -> dict | None:
    news_id = parse_id(raw_id)
    if news_id is None:
        return None
    news = await _fetch_one(db, news_id)
    return _news_to_dict(news) if news is not None else None


async def get_slider_news(db: AsyncSession) -> list[dict]:
    q = (
        select(News)
        .where(News.add_to_slider.is_(True))
        .options(selectinload(News.category))
        .order_by(asc(News.id))
        .execution_options(populate_existing=True)
    )
    result = await db.execute(q)
    return [_news_to_dict(n) for n in result.scalars().all()]


async def get_news_by_category(db: AsyncSession, raw_category_id: str | int) -> list[dict]:
    category_id = parse_id(raw_category_id)
    if category_id is None:
        return []
    q = (
        select(News)
        .where(News.category_id == category_id)
        .options(selectinload(News.category))
        .order_by(asc(News.id))
        .execution_options(populate_existing=True)
    )
    result = await db.execute(q)
    return [_news_to_dict(n) for n in result.scalars().all()]


async def update_news(db: AsyncSession, raw_id: str | int, data: NewsUpdate) -> dict | None:
    """
    Merge the fields explicitly set in *data* into the stored row.

    The merged record is validated against ``NewsRecord`` before anything
    is written, so an update cannot null out a required field.  Returns
    None when the article does not exist.
    """
    news_id = parse_id(raw_id)
    if news_id is None:
        return None
    news = await _fetch_one(db, news_id)
    if news is None:
        return None

    update_data = {
        k: v for k, v in data.model_dump(exclude_unset=True).items() if k in _UPDATABLE_FIELDS
    }
    merged = {field: getattr(news, field) for field in _UPDATABLE_FIELDS}
    merged.update(update_data)
    # Raises pydantic.ValidationError; the router maps it to ValidationFailure.
    NewsRecord.model_validate(merged)

    for field, value in update_data.items():
        setattr(news, field, value)
    await db.flush()

    updated = await _fetch_one(db, news_id)
    return _news_to_dict(updated) if updated is not None else None


async def delete_news(db: AsyncSession, raw_id: str | int) -> dict | None:
    """
    Delete the article and return its last known state.

    Returns None when the article does not exist.
    """
    news_id = parse_id(raw_id)
    if news_id is None:
        return None
    news = await _fetch_one(db, news_id)
    if news is None:
        return None

    snapshot = _news_to_dict(news)
    await db.delete(news)
    await db.flush()
    return snapshot
