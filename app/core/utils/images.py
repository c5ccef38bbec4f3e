"""Helpers for captured images travelling as base64 data URLs."""

from __future__ import annotations
import base64

DEFAULT_MIME = "image/jpeg"


def to_data_url(image_bytes: bytes, mime: str = DEFAULT_MIME) -> str:
    """Encode raw image bytes (e.g. st.camera_input) as a data URL."""
    b64 = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime};base64,{b64}"


def strip_data_url(image: str) -> str:
    """Return the base64 payload, with or without a `data:...,` prefix."""
    head, sep, tail = (image or "").partition(",")
    return tail if sep and tail else (image or "")


def as_jpeg_data_url(image: str) -> str:
    """Normalize an image payload to a JPEG data URL for the model."""
    return f"data:{DEFAULT_MIME};base64,{strip_data_url(image)}"


def data_url_to_bytes(image: str) -> bytes:
    """Decode a stored image back to raw bytes for st.image."""
    return base64.b64decode(strip_data_url(image))
