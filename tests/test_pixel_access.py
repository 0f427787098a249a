"""Tests for sampling, quantization and the convolution driver."""

import numpy as np
import pytest
from models.raster import RasterImage
from engines.pixel_access import sample, round_half_away, to_uint8, pad_to_shape, convolve


def test_sample_in_and_out_of_bounds():
    """Out-of-bounds reads are zero, never wrapped."""
    gray = RasterImage(np.arange(6, dtype=np.uint8).reshape(2, 3))
    rgb = RasterImage(np.full((2, 2, 3), 9, dtype=np.uint8))
    assert sample(gray, 2, 1) == 5
    assert sample(gray, -1, 0) == 0
    assert sample(gray, 3, 0) == 0
    assert sample(rgb, 1, 1) == (9, 9, 9)
    assert sample(rgb, 0, 5) == (0, 0, 0)


def test_round_half_away_from_zero():
    values = round_half_away(np.array([0.5, 1.5, 2.5, -0.5, 2.4, -2.6]))
    assert values.tolist() == [1.0, 2.0, 3.0, -1.0, 2.0, -3.0]


def test_to_uint8_clamps_and_rounds():
    """Negative, oversized, half and NaN values land in [0, 255]."""
    out = to_uint8(np.array([-5.0, 300.0, 127.5, np.nan, np.inf]))
    assert out.dtype == np.uint8
    assert out.tolist() == [0, 255, 128, 0, 255]


def test_pad_to_shape_zero_fills():
    padded = pad_to_shape(np.ones((2, 2, 3), dtype=np.uint8), 3, 4)
    assert padded.shape == (3, 4, 3)
    assert padded[:2, :2].min() == 1
    assert padded[2:].max() == 0 and padded[:, 2:].max() == 0


def test_identity_kernel():
    """A centered unit kernel returns the input."""
    image = RasterImage(np.random.randint(0, 256, (7, 5), dtype=np.uint8))
    kernel = np.zeros((3, 3))
    kernel[1, 1] = 1
    assert convolve(image, kernel).same_pixels(image)


def test_kernel_first_axis_walks_x():
    """kernel[i][j] weighs sample(x + i - k, y + j - k)."""
    pixels = np.random.randint(0, 256, (6, 8), dtype=np.uint8)
    kernel = np.zeros((3, 3))
    kernel[2, 1] = 1  # sample(x + 1, y)
    out = convolve(RasterImage(pixels), kernel).pixels
    assert np.array_equal(out[:, :-1], pixels[:, 1:])
    assert out[:, -1].max() == 0


def test_even_kernel_anchor():
    """2x2 kernels anchor at offsets {-1, 0}."""
    pixels = np.random.randint(0, 256, (5, 5), dtype=np.uint8)
    identity = convolve(RasterImage(pixels), np.array([[0, 0], [0, 1]])).pixels
    diagonal = convolve(RasterImage(pixels), np.array([[1, 0], [0, 0]])).pixels
    assert np.array_equal(identity, pixels)
    assert np.array_equal(diagonal[1:, 1:], pixels[:-1, :-1])
    assert diagonal[0].max() == 0 and diagonal[:, 0].max() == 0


def test_convolution_clamps():
    """Negative sums floor at 0, overflow saturates at 255."""
    image = RasterImage(np.full((3, 3), 200, dtype=np.uint8))
    assert convolve(image, np.full((3, 3), -1)).pixels.max() == 0
    assert convolve(image, np.full((3, 3), 1)).pixels.min() == 255


def test_kernel_larger_than_image():
    """1x1 images survive a 5x5 kernel."""
    image = RasterImage(np.array([[90]], dtype=np.uint8))
    out = convolve(image, np.full((5, 5), 1.0 / 25))
    assert out.pixels.tolist() == [[4]]


def test_color_kernel_keeps_channels():
    image = RasterImage(np.random.randint(0, 256, (4, 4, 3), dtype=np.uint8))
    kernel = np.zeros((3, 3))
    kernel[1, 1] = 1
    out = convolve(image, kernel)
    assert out.channels == 3
    assert out.same_pixels(image)
