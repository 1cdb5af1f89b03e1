"""Upload handling: validate an uploaded file and encode it for transport."""

import logging
from typing import Any, Optional, Union

from .constants import FILE_READ_MESSAGE, INVALID_UPLOAD_MESSAGE
from .exceptions import FileReadError, InvalidUploadError
from .models import ImagePayload

logger = logging.getLogger(__name__)


def is_image_media_type(media_type: Optional[str]) -> bool:
    """Check for a generic image/* media type."""
    return bool(media_type) and media_type.lower().startswith("image/")


def _read_all(source: Union[bytes, bytearray, Any]) -> bytes:
    """Read the whole file in one pass."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if hasattr(source, "getvalue"):
        return source.getvalue()
    return source.read()


def read_upload(
    source: Union[bytes, bytearray, Any],
    name: str,
    media_type: Optional[str],
) -> ImagePayload:
    """
    Turn an uploaded file into an image payload.

    Args:
        source: Raw bytes or a file-like object (e.g. Streamlit's UploadedFile)
        name: Original file name
        media_type: Media type reported by the browser

    Returns:
        ImagePayload with the base64-encoded file contents

    Raises:
        InvalidUploadError: If the media type is not an image type
        FileReadError: If the file cannot be read
    """
    if not is_image_media_type(media_type):
        logger.info(f"Rejected upload {name!r} with media type {media_type!r}")
        raise InvalidUploadError(INVALID_UPLOAD_MESSAGE)

    try:
        data = _read_all(source)
    except (OSError, ValueError, AttributeError) as e:
        logger.error(f"Error reading uploaded file {name!r}: {e}", exc_info=True)
        raise FileReadError(FILE_READ_MESSAGE) from e

    if not isinstance(data, (bytes, bytearray)):
        logger.error(f"Uploaded file {name!r} did not yield bytes")
        raise FileReadError(FILE_READ_MESSAGE)

    payload = ImagePayload.from_bytes(bytes(data), media_type=media_type, name=name)
    logger.debug(f"Encoded upload {name!r} ({len(data)} bytes, {media_type})")
    return payload


def read_uploaded_file(uploaded_file) -> ImagePayload:
    """Convenience wrapper for Streamlit's UploadedFile."""
    return read_upload(uploaded_file, name=uploaded_file.name, media_type=uploaded_file.type)
