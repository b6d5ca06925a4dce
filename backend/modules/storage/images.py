"""
Base64 image payload decoding.

Clients send images either as bare base64 or as a data URL
(`data:image/png;base64,....`). The content type is taken from the data
URL when present, otherwise sniffed from the file signature.
"""

import base64
import binascii
import re
from typing import Optional

from .exceptions import ImageTooLargeError, InvalidImageError
from .models import DecodedImage

DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>image/[a-zA-Z0-9.+-]+);base64,", re.IGNORECASE)

EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}

DEFAULT_CONTENT_TYPE = "image/jpeg"


def sniff_content_type(data: bytes) -> Optional[str]:
    """Identify JPEG, PNG, GIF or WEBP data by its leading bytes."""
    if data.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if data[:6] in (b"GIF87a", b"GIF89a"):
        return "image/gif"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return None


def decode_image(payload: str, max_bytes: int) -> DecodedImage:
    """
    Decode a base64 image payload.

    Args:
        payload: Bare base64 text or a data URL.
        max_bytes: Upper bound on the decoded size.

    Returns:
        DecodedImage with bytes, content type and file extension.

    Raises:
        InvalidImageError: If the payload is empty or not valid base64.
        ImageTooLargeError: If the decoded image exceeds max_bytes.
    """
    if not payload or not payload.strip():
        raise InvalidImageError("Image payload is empty")

    text = payload.strip()
    declared: Optional[str] = None
    match = DATA_URL_PATTERN.match(text)
    if match:
        declared = match.group("mime").lower()
        text = text[match.end():]
    text = "".join(text.split())

    # Rough pre-check so oversized payloads are rejected before decoding
    if len(text) * 3 // 4 > max_bytes + 3:
        raise ImageTooLargeError(len(text) * 3 // 4, max_bytes)

    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError(f"Image is not valid base64: {e}") from e

    if not data:
        raise InvalidImageError("Image payload is empty")
    if len(data) > max_bytes:
        raise ImageTooLargeError(len(data), max_bytes)

    content_type = declared if declared in EXTENSIONS else sniff_content_type(data)
    content_type = content_type or DEFAULT_CONTENT_TYPE
    if content_type == "image/jpg":
        content_type = "image/jpeg"

    return DecodedImage(
        data=data,
        content_type=content_type,
        extension=EXTENSIONS[content_type],
    )
