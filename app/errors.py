"""
Error kinds for the news API and their rendering as JSON envelopes.

Every failure leaves the service as a ``NewsError`` subclass.  The
exception handlers registered by ``register_exception_handlers`` turn
them into the ``{success, msg, error}`` envelope with the matching
status code, so routers never build failure responses by hand.
"""
import logging
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from app.schemas import Envelope

logger = logging.getLogger(__name__)


class NewsError(Exception):
    status_code: int = 401
    msg: str = ""
    error: object = None

    def __init__(self, error: object = None) -> None:
        if error is not None:
            self.error = error
        super().__init__(self.msg)

    def to_envelope(self) -> dict:
        return Envelope(success=False, msg=self.msg, error=self.error).model_dump(
            by_alias=True, exclude_none=True
        )


class InvalidArgument(NewsError):
    msg = "Invalid page number"
    error = "Invalid page number, should start with 1"


class ValidationFailure(NewsError):
    msg = "Inavalid Data. Something Went Wrong Please Try Again Later !"
    error = "Record Not Added.."


class NotFound(NewsError):
    msg = "No News Found..."
    error = "Record Not Found.."


class InternalFailure(NewsError):
    status_code = 500
    msg = "Internal Server Error occured."

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or cause.__class__.__name__)
        self.cause = cause


@contextmanager
def operation_boundary(name: str):
    """
    Convert whatever escapes a news operation into a ``NewsError``.

    Domain errors pass through untouched.  Rejected writes (pydantic or
    integrity errors) become ``ValidationFailure``; everything else is
    logged with its traceback and becomes ``InternalFailure``.
    """
    try:
        yield
    except NewsError as exc:
        logger.info("%s: %s", name, exc.msg)
        raise
    except ValidationError as exc:
        logger.info("%s: rejected data: %s", name, exc)
        raise ValidationFailure(jsonable_encoder(exc.errors(include_url=False))) from exc
    except IntegrityError as exc:
        logger.info("%s: store rejected write: %s", name, exc.orig)
        raise ValidationFailure() from exc
    except Exception as exc:
        logger.exception("%s failed", name)
        raise InternalFailure(exc) from exc


async def news_error_handler(request: Request, exc: NewsError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_envelope()))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    failure = ValidationFailure(jsonable_encoder(exc.errors()))
    return await news_error_handler(request, failure)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render failures raised outside ``operation_boundary`` (e.g. the commit in ``get_db``)."""
    logger.error("%s %s failed outside an operation: %r", request.method, request.url.path, exc)
    return await news_error_handler(request, InternalFailure(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NewsError, news_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
