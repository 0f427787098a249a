"""Smoothing windows, gradient kernels and edge-recombination sharpening."""

import logging
from typing import Optional, Union

import numpy as np
from scipy import ndimage

from models.operations import ArithmeticOp, FilterOp
from models.params import GaussianParams
from models.raster import RasterImage
from engines.arithmetic import apply_binary_arithmetic
from engines.errors import InvalidOperation
from engines.pixel_access import convolve, map_channels
from utils.constants import (
    SOBEL_KERNELS,
    PREWITT_KERNELS,
    ROBERTS_KERNELS,
    LAPLACIAN_KERNELS,
    DEFAULT_KERNEL_SIZE,
    DEFAULT_LAPLACIAN_NEIGHBORS,
)

logger = logging.getLogger(__name__)


def _window_side(kernel_size: int) -> int:
    """Windows span -(k//2)..k//2, so an even k widens to the next odd side."""
    return 2 * (max(int(kernel_size), 1) // 2) + 1


def mean(image: RasterImage, kernel_size: int = DEFAULT_KERNEL_SIZE) -> RasterImage:
    """Integer (floor) average over a zero-filled square window."""
    side = _window_side(kernel_size)
    ones = np.ones((side, side), dtype=np.int64)

    def _mean(channel):
        total = ndimage.correlate(channel.astype(np.int64), ones, mode='constant', cval=0)
        return (total // (side * side)).astype(np.uint8)

    return map_channels(image, _mean)


def median(image: RasterImage, kernel_size: int = DEFAULT_KERNEL_SIZE) -> RasterImage:
    """Middle element of the sorted zero-filled square window."""
    side = _window_side(kernel_size)
    return map_channels(
        image, lambda channel: ndimage.median_filter(channel, size=side, mode='constant', cval=0)
    )


def gaussian_kernel(size: int, sigma: float) -> np.ndarray:
    """
    2D Gaussian density sampled at integer offsets -(size-1)/2..(size-1)/2,
    normalized to sum 1. A non-positive sigma collapses to the identity kernel.
    """
    size = max(int(size), 1)
    center = (size - 1) // 2
    if not sigma > 0:
        kernel = np.zeros((size, size))
        kernel[center, center] = 1.0
        return kernel

    offsets = np.arange(size) - center
    xx, yy = np.meshgrid(offsets, offsets, indexing='ij')
    sigma_sq = sigma * sigma
    kernel = np.exp(-(xx ** 2 + yy ** 2) / (2.0 * sigma_sq)) / (2.0 * np.pi * sigma_sq)
    return kernel / kernel.sum()


def gaussian(image: RasterImage, params: Optional[GaussianParams] = None) -> RasterImage:
    params = params or GaussianParams()
    return convolve(image, gaussian_kernel(params.kernel_size, params.sigma))


def _select_kernel(table: dict, key, size: int) -> np.ndarray:
    """Look up a kernel; unknown keys give an all-zero kernel (a defined no-op)."""
    kernel = table.get(key)
    if kernel is None:
        logger.debug("No kernel for %r, using zero %dx%d kernel", key, size, size)
        return np.zeros((size, size), dtype=np.int64)
    return kernel


def sobel(image: RasterImage, direction: str) -> RasterImage:
    return convolve(image, _select_kernel(SOBEL_KERNELS, direction, 3))


def prewitt(image: RasterImage, direction: str) -> RasterImage:
    return convolve(image, _select_kernel(PREWITT_KERNELS, direction, 3))


def roberts(image: RasterImage, direction: str) -> RasterImage:
    return convolve(image, _select_kernel(ROBERTS_KERNELS, direction, 2))


def laplacian(image: RasterImage, neighbors: int = DEFAULT_LAPLACIAN_NEIGHBORS) -> RasterImage:
    return convolve(image, _select_kernel(LAPLACIAN_KERNELS, neighbors, 3))


def _add_back(image: RasterImage, edges: RasterImage) -> RasterImage:
    return apply_binary_arithmetic(ArithmeticOp.ADD, image, edges)


def sobel_sharpen(image: RasterImage, direction: str) -> RasterImage:
    return _add_back(image, sobel(image, direction))


def prewitt_sharpen(image: RasterImage, direction: str) -> RasterImage:
    return _add_back(image, prewitt(image, direction))


def roberts_sharpen(image: RasterImage, direction: str) -> RasterImage:
    return _add_back(image, roberts(image, direction))


def laplacian_sharpen(image: RasterImage, neighbors: int = DEFAULT_LAPLACIAN_NEIGHBORS) -> RasterImage:
    return _add_back(image, laplacian(image, neighbors))


_DIRECTIONAL = {
    FilterOp.SOBEL: sobel,
    FilterOp.PREWITT: prewitt,
    FilterOp.ROBERTS: roberts,
    FilterOp.SOBEL_SHARPEN: sobel_sharpen,
    FilterOp.PREWITT_SHARPEN: prewitt_sharpen,
    FilterOp.ROBERTS_SHARPEN: roberts_sharpen,
}


def apply_filter(
    op: Union[FilterOp, str],
    image: RasterImage,
    params: Union[int, str, GaussianParams, None] = None
) -> RasterImage:
    """
    Run a spatial filter.

    params is the window size for mean/median, a GaussianParams for
    gaussian, a direction for the gradient kernels and the neighbour count
    for laplacian. None selects the documented default.
    """
    try:
        op = FilterOp(op)
    except ValueError:
        raise InvalidOperation(str(op), "unknown filter") from None

    logger.debug("Filter %s on %r (params=%r)", op.value, image, params)
    if op is FilterOp.MEAN:
        return mean(image, DEFAULT_KERNEL_SIZE if params is None else params)
    if op is FilterOp.MEDIAN:
        return median(image, DEFAULT_KERNEL_SIZE if params is None else params)
    if op is FilterOp.GAUSSIAN:
        return gaussian(image, params)
    if op is FilterOp.LAPLACIAN:
        return laplacian(image, DEFAULT_LAPLACIAN_NEIGHBORS if params is None else params)
    if op is FilterOp.LAPLACIAN_SHARPEN:
        return laplacian_sharpen(image, DEFAULT_LAPLACIAN_NEIGHBORS if params is None else params)
    return _DIRECTIONAL[op](image, '' if params is None else params)
