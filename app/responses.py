from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.errors import NotFound
from app.schemas import Envelope

# Every successful news operation answers 201, reads included.
SUCCESS_STATUS = 201
NO_ERROR = "No Error"


def success(
    msg: str,
    data: Any,
    *,
    count: int | None = None,
    total_count: int | None = None,
    error: str | None = NO_ERROR,
) -> JSONResponse:
    envelope = Envelope(
        success=True, msg=msg, data=data, count=count, total_count=total_count, error=error
    )
    return JSONResponse(
        status_code=SUCCESS_STATUS,
        content=jsonable_encoder(envelope.model_dump(by_alias=True, exclude_none=True)),
    )


def require_record(record: dict | None) -> dict:
    if record is None:
        raise NotFound()
    return record


def require_results(items: list[dict]) -> list[dict]:
    """An empty collection is reported as ``NotFound``, not as an empty success."""
    if not items:
        raise NotFound()
    return items
