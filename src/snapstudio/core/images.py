"""Helpers for base64 image payloads.

Images cross every boundary as base64 strings, optionally prefixed with a
``data:image/<png|jpeg|jpg|webp>;base64,`` data URI header. The prefix is
stripped before a payload is sent to the remote model and
``data:image/png;base64,`` is added back to every received image.
"""

import base64
import binascii
import io
import logging
import re
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)

DATA_URI_PREFIX_PATTERN = re.compile(r"^data:image/(png|jpeg|jpg|webp);base64,")
PNG_DATA_URI_PREFIX = "data:image/png;base64,"
INLINE_MIME_TYPE = "image/png"


def strip_data_uri_prefix(asset: str) -> str:
    """Return the bare base64 payload of an image asset."""
    return DATA_URI_PREFIX_PATTERN.sub("", asset.strip(), count=1)


def to_data_uri(payload: str | bytes) -> str:
    """Build a displayable PNG data URI.

    Args:
        payload: Base64 text (with or without a prefix) or raw image bytes

    Returns:
        ``data:image/png;base64,...`` string
    """
    if isinstance(payload, bytes):
        payload = base64.b64encode(payload).decode("ascii")
    return f"{PNG_DATA_URI_PREFIX}{strip_data_uri_prefix(payload)}"


def image_bytes(asset: str) -> bytes:
    """Decode an image asset to raw bytes.

    Raises:
        ValueError: If the payload is not valid base64
    """
    try:
        return base64.b64decode(strip_data_uri_prefix(asset), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image payload: {e}") from e


def encode_image(source: str | Path | bytes | Image.Image) -> str:
    """Encode an uploaded image as a PNG data URI.

    Gradio hands uploads over as file paths or PIL images; both are
    re-encoded as PNG so the declared inline MIME type is always correct.

    Args:
        source: File path, raw bytes, or PIL Image

    Returns:
        PNG data URI
    """
    if isinstance(source, Image.Image):
        image = source
    elif isinstance(source, bytes):
        image = Image.open(io.BytesIO(source))
    else:
        image = Image.open(Path(source))

    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    logger.debug(f"Encoded image {image.size[0]}x{image.size[1]} as PNG")
    return to_data_uri(buffer.getvalue())


def decode_image(asset: str) -> Image.Image:
    """Decode an image asset into a PIL Image.

    Raises:
        ValueError: If the payload is not a decodable image
    """
    data = image_bytes(asset)
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except OSError as e:
        raise ValueError(f"Payload is not a decodable image: {e}") from e
    return image
