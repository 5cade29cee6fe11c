"""
Image Ingestion

Turns uploaded room photos and material swatches into data URIs and
buckets their proportions into one of the five canonical aspect ratios
the image model accepts as an output hint.
"""

import base64
import io
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image

from dreamroom.core.exceptions import InvalidImageError
from dreamroom.models.room import AspectRatio


DEFAULT_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True)
class IngestedImage:
    """A decoded upload, ready to be stored on a session."""
    data_uri: str
    mime_type: str
    width: int
    height: int
    aspect_ratio: AspectRatio


def classify_aspect_ratio(width: int, height: int) -> AspectRatio:
    """
    Map pixel dimensions to the nearest canonical aspect ratio.

    Thresholds are strict and checked in order, so a ratio of exactly 1.5
    lands in 4:3 and exactly 1.2 or 0.8 lands in 1:1.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

    ratio = width / height
    if ratio > 1.5:
        return AspectRatio.WIDE
    if ratio > 1.2:
        return AspectRatio.LANDSCAPE
    if ratio < 0.6:
        return AspectRatio.TALL
    if ratio < 0.8:
        return AspectRatio.PORTRAIT
    return AspectRatio.SQUARE


def encode_data_uri(data: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
    """Encode raw bytes as a base64 data URI."""
    encoded = base64.b64encode(data).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def split_data_uri(image: str) -> Tuple[str, bytes]:
    """
    Split a data URI into (mime_type, raw bytes).

    Bare base64 strings are accepted too and reported as JPEG.
    """
    mime_type = DEFAULT_MIME_TYPE
    payload = image
    if image.startswith("data:") and "," in image:
        header, payload = image.split(",", 1)
        declared = header[len("data:"):].split(";")[0]
        if declared:
            mime_type = declared
    return mime_type, base64.b64decode(payload)


def _open_verified(data: bytes) -> Image.Image:
    """Open and fully verify an image; verify() invalidates the handle so reopen after."""
    Image.open(io.BytesIO(data)).verify()
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


def ingest_image(data: bytes, content_type: Optional[str] = None) -> IngestedImage:
    """
    Decode an uploaded image and describe it.

    Args:
        data: Raw file bytes
        content_type: MIME type declared by the client, used only when the
            decoded format has no known MIME type

    Returns:
        IngestedImage with data URI, dimensions and aspect-ratio bucket

    Raises:
        InvalidImageError: if the bytes are empty or not a decodable image
    """
    if not data:
        raise InvalidImageError("Uploaded file is empty")

    try:
        image = _open_verified(data)
    except Exception as e:
        raise InvalidImageError(f"Could not decode image: {e}") from e

    width, height = image.size
    mime_type = Image.MIME.get(image.format or "") or content_type or DEFAULT_MIME_TYPE

    return IngestedImage(
        data_uri=encode_data_uri(data, mime_type),
        mime_type=mime_type,
        width=width,
        height=height,
        aspect_ratio=classify_aspect_ratio(width, height),
    )
