"""Tone and color mapping: grayscale, binarization, inversion, power law, equalization."""

import logging
from typing import Optional, Union

import numpy as np

from models.operations import ColorOp
from models.raster import RasterImage
from engines.color_space import luminance, to_gray
from engines.errors import InvalidOperation
from engines.pixel_access import to_uint8
from utils.constants import DEFAULT_BINARY_THRESHOLD, DEFAULT_EXPONENT

logger = logging.getLogger(__name__)


def to_binary(image: RasterImage, threshold: float = DEFAULT_BINARY_THRESHOLD) -> RasterImage:
    """White where luminance / 255 is strictly greater than threshold, else black."""
    luma = luminance(image).astype(np.float64) / 255.0
    return RasterImage(np.where(luma > threshold, 255, 0).astype(np.uint8))


def invert(image: RasterImage) -> RasterImage:
    """255 - value on every channel."""
    return RasterImage(255 - image.pixels)


def exponential(image: RasterImage, exponent: float = DEFAULT_EXPONENT) -> RasterImage:
    """Power-law curve round(255 * (v / 255) ** exponent), clamped."""
    normalized = image.pixels.astype(np.float64) / 255.0
    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        curved = 255.0 * np.power(normalized, exponent)
    return RasterImage(to_uint8(curved))


def hist_equalize(image: RasterImage) -> RasterImage:
    """Cumulative-histogram remapping of the luminance plane."""
    luma = luminance(image)
    cdf = np.cumsum(np.bincount(luma.ravel(), minlength=256))
    lut = np.floor(255.0 * cdf / cdf[-1]).astype(np.uint8)
    return RasterImage(lut[luma])


def apply_color(
    op: Union[ColorOp, str],
    image: RasterImage,
    arg: Optional[float] = None
) -> RasterImage:
    """Run a tone operation; arg is the threshold or exponent where one applies."""
    try:
        op = ColorOp(op)
    except ValueError:
        raise InvalidOperation(str(op), "unknown color operation") from None

    logger.debug("Color %s on %r (arg=%s)", op.value, image, arg)
    if op is ColorOp.TO_GRAY:
        return to_gray(image)
    if op is ColorOp.TO_BINARY:
        return to_binary(image, DEFAULT_BINARY_THRESHOLD if arg is None else arg)
    if op is ColorOp.INVERT:
        return invert(image)
    if op is ColorOp.EXPONENTIAL:
        return exponential(image, DEFAULT_EXPONENT if arg is None else arg)
    return hist_equalize(image)
