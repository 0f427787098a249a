"""Translation, rotation, nearest-neighbour resampling, mirroring and stretching.

Every function works on the raw (H, W) or (H, W, 3) buffer through its first
two axes, so gray and color images keep their channel count.
"""

import logging
import math
from typing import Optional, Union

import numpy as np

from models.operations import GeometryOp
from models.params import TranslateParams, RotateParams, ResizeParams, MirrorParams, StretchParams
from models.raster import RasterImage
from engines.errors import InvalidOperation
from engines.pixel_access import round_half_away

logger = logging.getLogger(__name__)


def _overlap(length: int, offset: int):
    """Source and destination slices for a 1D shift, or None when nothing lands."""
    src_start = max(0, -offset)
    src_end = min(length, length - offset)
    if src_start >= src_end:
        return None
    return slice(src_start, src_end), slice(src_start + offset, src_end + offset)


def translate(image: RasterImage, dx: int = 0, dy: int = 0) -> RasterImage:
    """Forward map (x, y) -> (x + dx, y + dy); pixels leaving the frame are dropped."""
    out = np.zeros_like(image.pixels)
    cols = _overlap(image.width, int(dx))
    rows = _overlap(image.height, int(dy))
    if cols is not None and rows is not None:
        out[rows[1], cols[1]] = image.pixels[rows[0], cols[0]]
    return RasterImage(out)


def rotate(image: RasterImage, angle: float = 0.0) -> RasterImage:
    """
    Rotate about (W/2, H/2) by inverse mapping: every destination pixel takes
    the nearest source pixel under the inverse rotation, rounding half away
    from zero. Destinations whose source falls outside stay black. Forward
    mapping would leave holes at non-axis-aligned angles.
    """
    height, width = image.height, image.width
    theta = math.radians(angle)
    sin_a, cos_a = math.sin(theta), math.cos(theta)
    cx, cy = width / 2.0, height / 2.0

    ny, nx = np.meshgrid(np.arange(height), np.arange(width), indexing='ij')
    rel_x, rel_y = nx - cx, ny - cy
    src_x = round_half_away(rel_x * cos_a + rel_y * sin_a + cx).astype(np.int64)
    src_y = round_half_away(-rel_x * sin_a + rel_y * cos_a + cy).astype(np.int64)

    inside = (src_x >= 0) & (src_x < width) & (src_y >= 0) & (src_y < height)
    out = np.zeros_like(image.pixels)
    out[inside] = image.pixels[src_y[inside], src_x[inside]]
    return RasterImage(out)


def _source_index(new_size: int, old_size: int) -> np.ndarray:
    """round(clamp((i + 1) / new * old, 1, old)) - 1 for every destination index."""
    scaled = (np.arange(new_size) + 1) / new_size * old_size
    return np.floor(np.clip(scaled, 1, old_size) + 0.5).astype(np.int64) - 1


def resize(image: RasterImage, width: Optional[int] = None, height: Optional[int] = None) -> RasterImage:
    """Nearest-neighbour resample covering the full source extent."""
    width = image.width if width is None else max(int(width), 1)
    height = image.height if height is None else max(int(height), 1)
    xs = _source_index(width, image.width)
    ys = _source_index(height, image.height)
    return RasterImage(image.pixels[ys[:, np.newaxis], xs[np.newaxis, :]])


def mirror(image: RasterImage, axis: str = 'x') -> RasterImage:
    """'x' flips left-right, 'y' flips top-bottom, anything else copies."""
    if axis == 'x':
        return RasterImage(image.pixels[:, ::-1])
    if axis == 'y':
        return RasterImage(image.pixels[::-1, :])
    return RasterImage(image.pixels)


def stretch(image: RasterImage, sx: float = 1.0, sy: float = 1.0) -> RasterImage:
    """resize(round(W * sx), round(H * sy))."""
    sx = sx if math.isfinite(sx) else 1.0
    sy = sy if math.isfinite(sy) else 1.0
    new_w = int(round_half_away(image.width * sx))
    new_h = int(round_half_away(image.height * sy))
    return resize(image, new_w, new_h)


def apply_geometry(
    op: Union[GeometryOp, str],
    image: RasterImage,
    params: Union[TranslateParams, RotateParams, ResizeParams, MirrorParams, StretchParams, None] = None
) -> RasterImage:
    """Run a geometric transform; None selects the no-op defaults."""
    try:
        op = GeometryOp(op)
    except ValueError:
        raise InvalidOperation(str(op), "unknown geometric transform") from None

    logger.debug("Geometry %s on %r (params=%r)", op.value, image, params)
    if op is GeometryOp.TRANSLATE:
        params = params or TranslateParams()
        return translate(image, params.dx, params.dy)
    if op is GeometryOp.ROTATE:
        params = params or RotateParams()
        return rotate(image, params.angle)
    if op is GeometryOp.RESIZE:
        params = params or ResizeParams()
        return resize(image, params.width, params.height)
    if op is GeometryOp.MIRROR:
        params = params or MirrorParams()
        return mirror(image, params.axis)
    params = params or StretchParams()
    return stretch(image, params.sx, params.sy)
