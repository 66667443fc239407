import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import dispose_engine, init_models
from app.errors import register_exception_handlers
from app.middleware import RequestTimingMiddleware
from app.routers import news

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging()
    if settings.CREATE_TABLES:
        await init_models()
    logger.info("News API started (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await dispose_engine()


app = FastAPI(
    title="News API",
    description="CRUD backend for news articles with inline images and categories",
    version=VERSION,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestTimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(news.router, prefix=settings.API_PREFIX)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": VERSION}
