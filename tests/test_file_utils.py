from io import BytesIO

import pytest
from PIL import Image

from thumbor_bridge.helpers.file_utils import (
    content_type_from_extension,
    detect_dims_from_bytes,
    detect_extension_from_bytes,
    extension_from_url,
)
from thumbor_bridge.services.in_memory_metadata_provider import (
    InMemoryMetadataProvider,
)

SVG = (
    b'<svg xmlns="http://www.w3.org/2000/svg" width="120.4" height="80">'
    b"</svg>"
)


def _png(width, height):
    buf = BytesIO()
    Image.new("RGB", (width, height), color=(0, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.mark.parametrize(
    "url, extension",
    [
        ("https://example.com/a.JPG", "jpg"),
        ("https://example.com/a.png?ver=2#top", "png"),
        ("https://example.com/dir.d/image", ""),
        ("https://example.com/", ""),
    ],
)
def test_extension_from_url(url, extension):
    assert extension_from_url(url) == extension


def test_png_bytes():
    data = _png(64, 32)
    assert detect_extension_from_bytes(data) == "png"
    assert detect_dims_from_bytes(data) == (64, 32)


def test_svg_bytes():
    assert detect_extension_from_bytes(SVG) == "svg"
    assert detect_dims_from_bytes(SVG) == (120, 80)


def test_unknown_bytes():
    with pytest.raises(ValueError):
        detect_extension_from_bytes(b"plain text, not an image")


def test_content_type_from_extension():
    assert content_type_from_extension("jpg") == "image/jpeg"
    assert content_type_from_extension("svg") == "image/svg+xml"
    assert content_type_from_extension("webp") == "image/webp"


def test_register_bytes():
    provider = InMemoryMetadataProvider()
    data = _png(40, 30)
    asset = provider.register_bytes("logo", "https://example.com/logo.png", data)

    assert provider.get_asset("logo") == asset
    assert asset.dimensions == (40, 30)
    assert (asset.size, asset.format) == (len(data), "png")
    assert provider.get_asset("other") is None
