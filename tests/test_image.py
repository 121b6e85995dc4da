import base64
import io

import pytest
from PIL import Image

from app.core.errors import InvalidImage
from app.utils.image import image_to_base64


def _png(width, height, color="gold"):
    buf = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(buf, format="PNG")
    return buf.getvalue()


def _decode(b64):
    return Image.open(io.BytesIO(base64.b64decode(b64)))


def test_large_image_is_scaled_to_fit():
    img = _decode(image_to_base64(_png(1800, 1200)))
    assert img.format == "JPEG"
    assert img.size == (900, 600)


def test_small_image_is_not_upscaled():
    img = _decode(image_to_base64(_png(300, 200)))
    assert img.size == (300, 200)


def test_output_is_pure_base64():
    encoded = image_to_base64(_png(10, 10))
    assert not encoded.startswith("data:")
    base64.b64decode(encoded, validate=True)


def test_not_an_image():
    with pytest.raises(InvalidImage):
        image_to_base64(b"definitely not a jpeg")


def test_encode_endpoint(client, auth_headers):
    res = client.post(
        "/images/encode",
        files={"file": ("ring.png", _png(2000, 1000), "image/png")},
        headers=auth_headers,
    )
    assert res.status_code == 200, res.text
    assert _decode(res.json()["image"]).size == (900, 450)


def test_encode_endpoint_rejects_garbage(client, auth_headers):
    res = client.post(
        "/images/encode",
        files={"file": ("ring.png", b"garbage", "image/png")},
        headers=auth_headers,
    )
    assert res.status_code == 400
