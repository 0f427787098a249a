"""Bounds-safe sampling, zero padding, quantization and the shared convolution driver."""

import logging
from typing import Callable, Tuple, Union

import numpy as np
from scipy import ndimage

from models.raster import RasterImage

logger = logging.getLogger(__name__)


def sample(image: RasterImage, x: int, y: int) -> Union[int, Tuple[int, int, int]]:
    """Channel value(s) at (x, y). Out-of-bounds coordinates read as zero."""
    if 0 <= x < image.width and 0 <= y < image.height:
        value = image.pixels[y, x]
        if image.is_gray:
            return int(value)
        return tuple(int(c) for c in value)
    return 0 if image.is_gray else (0, 0, 0)


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to nearest, ties away from zero."""
    values = np.asarray(values, dtype=np.float64)
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def to_uint8(values: np.ndarray) -> np.ndarray:
    """Clamp to [0, 255] and round. NaN becomes 0."""
    values = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(round_half_away(values), 0, 255).astype(np.uint8)


def pad_to_shape(pixels: np.ndarray, height: int, width: int) -> np.ndarray:
    """Zero-pad the bottom/right of a pixel buffer up to (height, width)."""
    pad_h = height - pixels.shape[0]
    pad_w = width - pixels.shape[1]
    if pad_h == 0 and pad_w == 0:
        return pixels.copy()
    pad = [(0, pad_h), (0, pad_w)] + [(0, 0)] * (pixels.ndim - 2)
    return np.pad(pixels, pad, mode='constant', constant_values=0)


def map_channels(image: RasterImage, func: Callable[[np.ndarray], np.ndarray]) -> RasterImage:
    """Apply a 2D uint8 -> uint8 function to every channel, keeping the format."""
    if image.is_gray:
        return RasterImage(func(image.pixels))
    planes = [func(image.pixels[:, :, ch]) for ch in range(3)]
    return RasterImage(np.stack(planes, axis=-1))


def correlate_channel(channel: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """
    Accumulate sum(kernel[i][j] * sample(x + i - k, y + j - k)) in float64
    with k = len(kernel) // 2 and a zero-filled border.

    The kernel's first axis walks x, so it is transposed onto the (row, col)
    layout of the pixel buffer. scipy anchors even-sized kernels at
    size // 2, which gives the 2x2 Roberts cross offsets {-1, 0}.
    """
    weights = np.asarray(kernel, dtype=np.float64).T
    return ndimage.correlate(channel.astype(np.float64), weights, mode='constant', cval=0.0)


def convolve(image: RasterImage, kernel: np.ndarray) -> RasterImage:
    """Run a kernel over every channel, then clamp and round to uint8."""
    kernel = np.asarray(kernel)
    logger.debug("Convolving %r with %dx%d kernel", image, kernel.shape[0], kernel.shape[1])
    return map_channels(image, lambda channel: to_uint8(correlate_channel(channel, kernel)))
