"""Tests for smoothing, gradient kernels and sharpening."""

import numpy as np
import pytest
from models.operations import FilterOp
from models.params import GaussianParams
from models.raster import RasterImage
from engines.errors import InvalidOperation
from engines.spatial_filter import (
    apply_filter,
    mean,
    median,
    gaussian,
    gaussian_kernel,
    sobel,
    prewitt,
    roberts,
    laplacian,
    laplacian_sharpen,
)


def _flat(value=100, shape=(5, 5)):
    return RasterImage(np.full(shape, value, dtype=np.uint8))


def _step():
    """Top half black, bottom half 200."""
    pixels = np.zeros((8, 8), dtype=np.uint8)
    pixels[4:] = 200
    return RasterImage(pixels)


def test_mean_zero_filled_border():
    """Border windows average in zeros: corner 400 // 9, edge 600 // 9."""
    out = mean(_flat(), 3).pixels
    assert out[2, 2] == 100
    assert out[0, 0] == 44
    assert out[0, 2] == 66


def test_median_border_and_outlier():
    out = median(_flat(), 3).pixels
    assert out[2, 2] == 100
    assert out[0, 0] == 0      # four 100s, five zeros
    assert out[0, 2] == 100    # six 100s, three zeros

    noisy = np.full((5, 5), 50, dtype=np.uint8)
    noisy[2, 2] = 255
    assert median(RasterImage(noisy), 3).pixels[2, 2] == 50


def test_window_larger_than_image():
    image = RasterImage(np.array([[98]], dtype=np.uint8))
    assert mean(image, 7).pixels.tolist() == [[2]]
    assert median(image, 7).pixels.tolist() == [[0]]


def test_gaussian_kernel_shape():
    kernel = gaussian_kernel(5, 1.2)
    assert kernel.shape == (5, 5)
    assert np.isclose(kernel.sum(), 1.0)
    assert np.allclose(kernel, kernel.T)
    assert kernel[2, 2] == kernel.max()


def test_gaussian_zero_sigma_is_identity():
    kernel = gaussian_kernel(3, 0.0)
    assert kernel.sum() == 1.0 and kernel[1, 1] == 1.0
    image = RasterImage(np.random.randint(0, 256, (6, 6), dtype=np.uint8))
    assert gaussian(image, GaussianParams(3, 0.0)).same_pixels(image)


def test_gaussian_preserves_flat_interior():
    out = gaussian(_flat(shape=(7, 7)), GaussianParams(3, 1.0)).pixels
    assert np.all(out[1:-1, 1:-1] == 100)
    assert out[0, 0] < 100


def test_sobel_horizontal_edge():
    """'h' responds to a change along y."""
    out = sobel(_step(), 'h').pixels
    assert np.all(out[3, 1:-1] == 255)
    assert np.all(out[4, 1:-1] == 255)
    assert np.all(out[2] == 0)
    assert np.all(out[5, 1:-1] == 0)


def test_sobel_vertical_ignores_horizontal_edge():
    out = sobel(_step(), 'v').pixels
    assert np.all(out[:, 1:-1] == 0)


def test_prewitt_horizontal_edge():
    out = prewitt(_step(), 'h').pixels
    assert np.all(out[3, 1:-1] == 255)
    assert np.all(out[1] == 0)


def test_roberts_cross_on_flat_image():
    """'\\' is I(x, y) - I(x-1, y-1); '/' is I(x, y-1) - I(x-1, y)."""
    back = roberts(_flat(), '\\').pixels
    assert np.all(back[1:, 1:] == 0)
    assert np.all(back[0] == 100) and np.all(back[:, 0] == 100)

    forward = roberts(_flat(), '/').pixels
    assert np.all(forward[1:, 1:] == 0)
    assert np.all(forward[1:, 0] == 100)
    assert np.all(forward[0] == 0)


@pytest.mark.parametrize("func, arg", [
    (sobel, 'd'),
    (prewitt, ''),
    (roberts, 'x'),
    (laplacian, 5),
])
def test_unknown_selector_is_zero_kernel(func, arg):
    """Unrecognized directions and neighbour counts give an all-zero result."""
    image = RasterImage(np.random.randint(0, 256, (6, 6), dtype=np.uint8))
    assert func(image, arg).pixels.max() == 0


@pytest.mark.parametrize("neighbors", [4, 8])
def test_laplacian_of_flat_is_zero(neighbors):
    assert laplacian(_flat(), neighbors).pixels.max() == 0


@pytest.mark.parametrize("shape", [(6, 6), (6, 6, 3)])
def test_laplacian_sharpen_flat_unchanged(shape):
    image = _flat(77, shape)
    out = laplacian_sharpen(image, 4)
    assert out.channels == image.channels
    assert out.same_pixels(image)


def test_sharpen_adds_edges_back():
    image = _step()
    out = apply_filter(FilterOp.SOBEL_SHARPEN, image, 'h').pixels
    assert np.all(out[3, 1:-1] == 255)
    assert np.all(out[1] == 0)


def test_color_filters_keep_channels():
    image = RasterImage(np.random.randint(0, 256, (8, 8, 3), dtype=np.uint8))
    for op in FilterOp:
        assert apply_filter(op, image).channels == 3


def test_apply_filter_defaults_and_unknown():
    image = RasterImage(np.random.randint(0, 256, (6, 6), dtype=np.uint8))
    assert apply_filter('mean', image).same_pixels(mean(image, 3))
    assert apply_filter('gaussian', image).same_pixels(gaussian(image, GaussianParams()))
    with pytest.raises(InvalidOperation):
        apply_filter('bilateral', image)
