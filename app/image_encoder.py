"""
Image encoder: turns an image into the inline data-URI stored on News.

``encode_upload`` serves the HTTP create path; ``encode_file`` reads an
image from disk (used by the seed script).  Both return only the base64
text; ``to_data_uri`` assembles the final ``data:<mime>;base64,...``
string.
"""
import base64
import mimetypes
from pathlib import Path

from fastapi import UploadFile

SUPPORTED_TYPES: frozenset[str] = frozenset(
    {
        "image/png",
        "image/jpeg",
        "image/gif",
        "image/webp",
        "image/bmp",
        "image/svg+xml",
    }
)


class ImageEncodingError(Exception):
    pass


def _check_type(content_type: str | None) -> str:
    if content_type not in SUPPORTED_TYPES:
        raise ImageEncodingError(f"Unsupported image type: {content_type!r}")
    return content_type


def _b64(data: bytes) -> str:
    if not data:
        raise ImageEncodingError("Image is empty")
    return base64.b64encode(data).decode("ascii")


def to_data_uri(content_type: str, encoded: str) -> str:
    return f"data:{content_type};base64,{encoded}"


def encode_file(path: str | Path) -> tuple[str, str]:
    """
    Return ``(content_type, base64_text)`` for the image at *path*.

    The MIME type is guessed from the file extension.  Raises
    ``ImageEncodingError`` when the file cannot be read or is not a
    supported image type.
    """
    path = Path(path)
    content_type, _ = mimetypes.guess_type(path.name)
    _check_type(content_type)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ImageEncodingError(f"Cannot read image {path}: {exc}") from exc
    return content_type, _b64(data)


async def encode_upload(upload: UploadFile) -> tuple[str, str]:
    """Return ``(content_type, base64_text)`` for an uploaded image."""
    content_type = _check_type(upload.content_type)
    data = await upload.read()
    return content_type, _b64(data)
