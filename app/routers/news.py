from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import PaginationParams
from app.errors import ValidationFailure, operation_boundary
from app.responses import require_record, require_results, success
from app.schemas import NewsCreate, NewsUpdate
from app.services import news_service

router = APIRouter(prefix="/news", tags=["news"])

FOUND_MSG = "News Found Successfully"


@router.post("/add-news", status_code=201)
async def add_news(
    title: str = Form(...),
    content: str = Form(...),
    author: str = Form(...),
    category: int | None = Form(None),
    add_to_slider: bool = Form(False, alias="addToSlider"),
    news_image: UploadFile = File(..., alias="newsImage"),
    db: AsyncSession = Depends(get_db),
):
    with operation_boundary("add-news"):
        data = NewsCreate(
            title=title,
            content=content,
            author=author,
            category=category,
            addToSlider=add_to_slider,
        )
        news = await news_service.create_news(db, data, news_image)
        if news is None:
            raise ValidationFailure()
        return success("Successfully Added News", news, error=None)


@router.get("/get-all-news", status_code=201)
async def get_all_news(
    pagination: PaginationParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    with operation_boundary("get-all-news"):
        items, total = await news_service.list_news(db, pagination.page_no, pagination.page_limit)
        return success(FOUND_MSG, items, count=len(items), total_count=total)


@router.get("/get-news-byId", status_code=201)
async def get_news_by_id(
    news_id: str = Query(..., alias="id"),
    db: AsyncSession = Depends(get_db),
):
    with operation_boundary("get-news-byId"):
        news = require_record(await news_service.get_news(db, news_id))
        return success(FOUND_MSG, news)


@router.get("/get-slider-news", status_code=201)
async def get_slider_news(db: AsyncSession = Depends(get_db)):
    with operation_boundary("get-slider-news"):
        items = require_results(await news_service.get_slider_news(db))
        return success(FOUND_MSG, items)


@router.get("/get-news-category", status_code=201)
async def get_news_by_category(
    category_id: str = Query(..., alias="id"),
    db: AsyncSession = Depends(get_db),
):
    with operation_boundary("get-news-category"):
        items = require_results(await news_service.get_news_by_category(db, category_id))
        return success(FOUND_MSG, items, count=len(items))


@router.put("/update-news", status_code=201)
async def update_news(
    data: NewsUpdate,
    news_id: str = Query(..., alias="id"),
    db: AsyncSession = Depends(get_db),
):
    with operation_boundary("update-news"):
        news = require_record(await news_service.update_news(db, news_id, data))
        return success("News Updated Successfully", news)


@router.delete("/delete-news", status_code=201)
async def delete_news(
    news_id: str = Query(..., alias="id"),
    db: AsyncSession = Depends(get_db),
):
    with operation_boundary("delete-news"):
        news = require_record(await news_service.delete_news(db, news_id))
        return success("News Deleted Successfully", news)
