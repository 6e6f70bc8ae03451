# core/utils/image.py
import base64
import binascii
import logging
from io import BytesIO
from typing import Optional

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"


def detect_mime_type(image_data: bytes) -> str:
    """Sniff the MIME type of raw image bytes, falling back to JPEG."""
    try:
        with Image.open(BytesIO(image_data)) as img:
            return Image.MIME.get(img.format, DEFAULT_MIME_TYPE)
    except (UnidentifiedImageError, OSError):
        return DEFAULT_MIME_TYPE


def to_data_uri(image_data: Optional[bytes]) -> Optional[str]:
    """Encode stored image bytes as a ``data:<mime>;base64,`` URI."""
    if not image_data:
        return None
    encoded = base64.b64encode(image_data).decode("ascii")
    return f"data:{detect_mime_type(image_data)};base64,{encoded}"


def decode_image(value: str) -> bytes:
    """Decode a base64 data URI (or bare base64 string) into bytes.

    Raises:
        ValueError: If the value is empty or not valid base64
    """
    if not value:
        raise ValueError("Invalid Base64 image format")

    payload = value
    if value.startswith("data:"):
        header, _, payload = value.partition(",")
        if not header.endswith(";base64") or not payload:
            raise ValueError("Invalid Base64 image format")

    try:
        image_data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("Invalid Base64 image format")

    if not image_data:
        raise ValueError("Invalid Base64 image format")
    return image_data
