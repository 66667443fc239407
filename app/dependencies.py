from fastapi import Query

from app.config import settings


class PaginationParams:
    """
    Reusable FastAPI dependency that parses the ``pageNo`` / ``pageLimit``
    query parameters of the news list.

    Usage in a router::

        @router.get("/get-all-news")
        async def get_all_news(pagination: PaginationParams = Depends()):
            ...

    Attributes
    ----------
    page_no:
        1-based page number.  Not range-checked here; the service
        rejects ``pageNo <= 0`` with ``InvalidArgument``.
    page_limit:
        Number of items per page (minimum 1), passed through unchanged
        so that ``skip = page_limit * (page_no - 1)`` holds for any value.
    """

    def __init__(
        self,
        page_no: int = Query(
            1,
            alias="pageNo",
            description="Page number (1-based).",
        ),
        page_limit: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            alias="pageLimit",
            ge=1,
            description="Number of items returned per page.",
        ),
    ) -> None:
        self.page_no = page_no
        self.page_limit = page_limit
