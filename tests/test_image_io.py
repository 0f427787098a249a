"""Tests for OpenCV-backed image I/O."""

import base64

import numpy as np
import pytest
from models.raster import RasterImage
from engines.errors import DecodeError, UnsupportedFormat
from utils.image_io import (
    load_image,
    save_image,
    decode_image,
    encode_image,
    decode_base64,
    encode_base64,
)


@pytest.mark.parametrize("shape", [(10, 14), (10, 14, 3)])
def test_png_file_round_trip(tmp_path, shape):
    image = RasterImage(np.random.randint(0, 256, shape, dtype=np.uint8))
    path = tmp_path / "image.png"
    save_image(image, path)
    loaded = load_image(path)
    assert loaded.format is image.format
    assert loaded.same_pixels(image)


def test_channel_order_is_rgb(tmp_path):
    pixels = np.zeros((2, 2, 3), dtype=np.uint8)
    pixels[..., 0] = 255
    path = tmp_path / "red.png"
    save_image(RasterImage(pixels), path)
    assert load_image(path).pixels[0, 0].tolist() == [255, 0, 0]


def test_base64_transport_is_bmp():
    image = RasterImage(np.random.randint(0, 256, (7, 9, 3), dtype=np.uint8))
    text = encode_base64(image)
    assert base64.b64decode(text)[:2] == b"BM"
    assert decode_base64(text).same_pixels(image)


def test_encode_decode_bytes():
    image = RasterImage(np.random.randint(0, 256, (5, 5), dtype=np.uint8))
    assert decode_image(encode_image(image, 'png')).same_pixels(image)


def test_missing_file(tmp_path):
    with pytest.raises(DecodeError):
        load_image(tmp_path / "absent.png")


@pytest.mark.parametrize("data", [b"", b"not an image at all"])
def test_garbage_bytes(data):
    with pytest.raises(DecodeError):
        decode_image(data)


def test_invalid_base64():
    with pytest.raises(DecodeError):
        decode_base64("***not base64***")


def test_unsupported_extension(tmp_path):
    image = RasterImage(np.zeros((2, 2), dtype=np.uint8))
    with pytest.raises(UnsupportedFormat):
        save_image(image, tmp_path / "image.xyz")
    with pytest.raises(UnsupportedFormat):
        encode_image(image, '.xyz')
