"""Data URL helpers for captured images."""

from core.utils.images import (
    as_jpeg_data_url,
    data_url_to_bytes,
    strip_data_url,
    to_data_url,
)


def test_to_data_url():
    assert to_data_url(b"ABC") == "data:image/jpeg;base64,QUJD"
    assert to_data_url(b"ABC", "image/png") == "data:image/png;base64,QUJD"


def test_strip_data_url():
    assert strip_data_url("data:image/png;base64,QUJD") == "QUJD"
    assert strip_data_url("QUJD") == "QUJD"
    assert strip_data_url("") == ""


def test_as_jpeg_data_url_relabels_mime():
    assert as_jpeg_data_url("data:image/png;base64,QUJD") == "data:image/jpeg;base64,QUJD"


def test_data_url_to_bytes():
    assert data_url_to_bytes("data:image/jpeg;base64,QUJD") == b"ABC"
