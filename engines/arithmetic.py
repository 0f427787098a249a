"""Per-pixel binary arithmetic between two images of possibly different sizes."""

import logging
from typing import Tuple, Union

import numpy as np

from models.operations import ArithmeticOp
from models.raster import RasterImage
from engines.color_space import to_rgb
from engines.errors import InvalidOperation
from engines.pixel_access import pad_to_shape

logger = logging.getLogger(__name__)


def _aligned(image_a: RasterImage, image_b: RasterImage) -> Tuple[np.ndarray, np.ndarray]:
    """
    Bring both buffers to a common format and to the per-axis maximum size.
    Areas past a smaller image's bounds read as zero.
    """
    if image_a.is_gray != image_b.is_gray:
        image_a, image_b = to_rgb(image_a), to_rgb(image_b)
    height = max(image_a.height, image_b.height)
    width = max(image_a.width, image_b.width)
    a = pad_to_shape(image_a.pixels, height, width).astype(np.int32)
    b = pad_to_shape(image_b.pixels, height, width).astype(np.int32)
    return a, b


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Saturating sum."""
    return np.minimum(a + b, 255).astype(np.uint8)


def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Saturating difference, floored at 0."""
    return np.maximum(a - b, 0).astype(np.uint8)


def mul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Multiplicative blend (a * b) / 255."""
    return np.minimum((a * b) // 255, 255).astype(np.uint8)


def div(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """(a * 255) / b clamped to 255; a zero divisor yields 255."""
    quotient = (a * 255) // np.where(b == 0, 1, b)
    return np.where(b == 0, 255, np.minimum(quotient, 255)).astype(np.uint8)


_OPERATIONS = {
    ArithmeticOp.ADD: add,
    ArithmeticOp.SUB: sub,
    ArithmeticOp.MUL: mul,
    ArithmeticOp.DIV: div,
}


def apply_binary_arithmetic(
    op: Union[ArithmeticOp, str],
    image_a: RasterImage,
    image_b: RasterImage
) -> RasterImage:
    """
    Combine two images channel by channel.

    Output size is the per-axis maximum of the inputs. Two LUMA8 inputs give
    LUMA8; any RGB8 input promotes both sides to RGB8.
    """
    try:
        op = ArithmeticOp(op)
    except ValueError:
        raise InvalidOperation(str(op), "unknown arithmetic operator") from None

    a, b = _aligned(image_a, image_b)
    logger.debug("Arithmetic %s on %r and %r", op.value, image_a, image_b)
    return RasterImage(_OPERATIONS[op](a, b))
