"""Luminance reduction and format promotion."""

import numpy as np

from models.raster import RasterImage, PixelFormat
from engines.pixel_access import to_uint8


def rgb_to_luma(rgb: np.ndarray) -> np.ndarray:
    """RGB to luminance using ITU-R BT.601 weights (float result)."""
    rgb = rgb.astype(np.float64)
    R, G, B = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    return 0.299 * R + 0.587 * G + 0.114 * B


def luminance(image: RasterImage) -> np.ndarray:
    """Single-channel uint8 luminance plane of any image."""
    if image.is_gray:
        return image.pixels.copy()
    return to_uint8(rgb_to_luma(image.pixels))


def to_gray(image: RasterImage) -> RasterImage:
    """Reduce to LUMA8; gray input is copied unchanged."""
    return RasterImage(luminance(image))


def to_rgb(image: RasterImage) -> RasterImage:
    """Promote to RGB8 by replicating luminance; RGB input is copied unchanged."""
    if image.format is PixelFormat.RGB8:
        return RasterImage(image.pixels)
    return RasterImage(np.repeat(image.pixels[:, :, np.newaxis], 3, axis=2))
