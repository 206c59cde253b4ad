"""Unit tests for base64 image helpers."""

import base64
import io

import pytest
from PIL import Image

from snapstudio.core.images import (
    PNG_DATA_URI_PREFIX,
    decode_image,
    encode_image,
    image_bytes,
    strip_data_uri_prefix,
    to_data_uri,
)


class TestDataUri:
    """Tests for prefix handling."""

    @pytest.mark.parametrize("kind", ["png", "jpeg", "jpg", "webp"])
    def test_strip_prefix(self, kind: str):
        """Supported image prefixes are removed."""
        assert strip_data_uri_prefix(f"data:image/{kind};base64,QUJD") == "QUJD"

    def test_strip_bare_payload(self):
        """Bare payloads pass through."""
        assert strip_data_uri_prefix("QUJD") == "QUJD"

    def test_to_data_uri_from_bytes(self):
        """Raw bytes are base64 encoded."""
        assert to_data_uri(b"ABC") == f"{PNG_DATA_URI_PREFIX}QUJD"

    def test_to_data_uri_replaces_prefix(self):
        """An existing prefix is normalized to PNG."""
        assert to_data_uri("data:image/jpeg;base64,QUJD") == f"{PNG_DATA_URI_PREFIX}QUJD"

    def test_image_bytes(self):
        """Payloads decode to raw bytes."""
        assert image_bytes(f"{PNG_DATA_URI_PREFIX}QUJD") == b"ABC"

    def test_image_bytes_invalid(self):
        """Invalid base64 raises ValueError."""
        with pytest.raises(ValueError):
            image_bytes("not base64!")


class TestEncodeDecode:
    """Tests for encode_image / decode_image."""

    def test_encode_from_path(self, sample_image_file):
        """File uploads are encoded as PNG data URIs."""
        encoded = encode_image(sample_image_file)
        assert encoded.startswith(PNG_DATA_URI_PREFIX)
        assert decode_image(encoded).size == (8, 6)

    def test_encode_from_bytes(self, png_bytes):
        """Raw bytes are accepted."""
        assert decode_image(encode_image(png_bytes)).size == (8, 6)

    def test_encode_jpeg_as_png(self):
        """Non-PNG sources are re-encoded as PNG."""
        buffer = io.BytesIO()
        Image.new("RGB", (4, 4), "blue").save(buffer, format="JPEG")
        decoded = decode_image(encode_image(buffer.getvalue()))
        assert decoded.format == "PNG"

    def test_encode_palette_image(self):
        """Palette images are converted to RGBA."""
        image = Image.new("P", (4, 4))
        assert decode_image(encode_image(image)).mode == "RGBA"

    def test_decode_non_image(self):
        """A payload that is not an image raises ValueError."""
        payload = base64.b64encode(b"definitely not an image").decode("ascii")
        with pytest.raises(ValueError):
            decode_image(payload)
