"""
String command surface.

Maps a command name such as "filter/gaussian" plus its text argument onto
the typed engine calls. Individual values that fail to parse fall back to
the operation's default; a wrong number of comma-separated values for a
multi-parameter operation raises InvalidArguments.
"""

import logging
import math
from typing import Callable, Dict, List, Optional

from models.operations import ColorOp, ArithmeticOp, FilterOp, FrequencyOp, GeometryOp
from models.params import (
    GaussianParams,
    HomomorphicParams,
    TranslateParams,
    RotateParams,
    ResizeParams,
    MirrorParams,
    StretchParams,
)
from models.raster import RasterImage
from engines.arithmetic import apply_binary_arithmetic
from engines.errors import InvalidArguments, InvalidOperation
from engines.fourier_descriptor import reconstruct_descriptor
from engines.frequency import apply_frequency
from engines.geometry import apply_geometry
from engines.spatial_filter import apply_filter
from engines.tone import apply_color
from utils.constants import (
    DEFAULT_BINARY_THRESHOLD,
    DEFAULT_EXPONENT,
    DEFAULT_KERNEL_SIZE,
    DEFAULT_GAUSSIAN_SIGMA,
    DEFAULT_LAPLACIAN_NEIGHBORS,
    DEFAULT_HOMOMORPHIC_R_L,
    DEFAULT_HOMOMORPHIC_R_H,
    DEFAULT_HOMOMORPHIC_C,
    DEFAULT_HOMOMORPHIC_D0,
    DEFAULT_DESCRIPTOR_TERMS,
    DEFAULT_MIRROR_AXIS,
)
from utils.metrics import Timer

logger = logging.getLogger(__name__)


def parse_float(text: Optional[str], default: float) -> float:
    """Finite float from text, else default."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        logger.debug("Could not parse %r as float, using %s", text, default)
        return default
    if not math.isfinite(value):
        logger.debug("Non-finite value %r, using %s", text, default)
        return default
    return value


def parse_int(text: Optional[str], default: int) -> int:
    """Integer from text, else default."""
    try:
        return int(text.strip())
    except (AttributeError, ValueError):
        logger.debug("Could not parse %r as int, using %s", text, default)
        return default


def split_args(operation: str, arg: Optional[str], arity: int) -> List[Optional[str]]:
    """
    Split a comma-separated argument string into exactly `arity` fields.
    Blank text means every field takes its default.
    """
    if arg is None or not arg.strip():
        return [None] * arity
    parts = [part.strip() for part in arg.split(',')]
    if len(parts) != arity:
        raise InvalidArguments(
            operation,
            f"expected {arity} comma-separated value{'s' if arity > 1 else ''}, got {len(parts)}",
            expected=arity,
        )
    return parts


def _text(arg: Optional[str]) -> str:
    return '' if arg is None else arg.strip()


# --- per-family adapters: (operation name, image, arg text) -> image ---

def _color(op: ColorOp) -> Callable:
    def run(name, image, arg):
        value = None
        if op is ColorOp.TO_BINARY:
            value = parse_float(arg, DEFAULT_BINARY_THRESHOLD)
        elif op is ColorOp.EXPONENTIAL:
            value = parse_float(arg, DEFAULT_EXPONENT)
        return apply_color(op, image, value)
    return run


def _filter(op: FilterOp) -> Callable:
    def run(name, image, arg):
        if op in (FilterOp.MEAN, FilterOp.MEDIAN):
            params = parse_int(arg, DEFAULT_KERNEL_SIZE)
        elif op is FilterOp.GAUSSIAN:
            size, sigma = split_args(name, arg, 2)
            params = GaussianParams(parse_int(size, DEFAULT_KERNEL_SIZE), parse_float(sigma, DEFAULT_GAUSSIAN_SIGMA))
        elif op in (FilterOp.LAPLACIAN, FilterOp.LAPLACIAN_SHARPEN):
            params = parse_int(arg, DEFAULT_LAPLACIAN_NEIGHBORS)
        else:
            params = _text(arg)
        return apply_filter(op, image, params)
    return run


def _frequency(op: FrequencyOp) -> Callable:
    def run(name, image, arg):
        params = None
        if op is FrequencyOp.HOMOMORPHIC:
            r_l, r_h, c, d0 = split_args(name, arg, 4)
            params = HomomorphicParams(
                parse_float(r_l, DEFAULT_HOMOMORPHIC_R_L),
                parse_float(r_h, DEFAULT_HOMOMORPHIC_R_H),
                parse_float(c, DEFAULT_HOMOMORPHIC_C),
                parse_float(d0, DEFAULT_HOMOMORPHIC_D0),
            )
        return apply_frequency(op, image, params)
    return run


def _geometry(op: GeometryOp) -> Callable:
    def run(name, image, arg):
        if op is GeometryOp.TRANSLATE:
            dx, dy = split_args(name, arg, 2)
            params = TranslateParams(parse_int(dx, 0), parse_int(dy, 0))
        elif op is GeometryOp.ROTATE:
            params = RotateParams(parse_float(arg, 0.0))
        elif op is GeometryOp.RESIZE:
            width, height = split_args(name, arg, 2)
            params = ResizeParams(parse_int(width, image.width), parse_int(height, image.height))
        elif op is GeometryOp.MIRROR:
            params = MirrorParams(_text(arg) or DEFAULT_MIRROR_AXIS)
        else:
            sx, sy = split_args(name, arg, 2)
            params = StretchParams(parse_float(sx, 1.0), parse_float(sy, 1.0))
        return apply_geometry(op, image, params)
    return run


def _descriptor(name, image, arg):
    return reconstruct_descriptor(image, parse_int(arg, DEFAULT_DESCRIPTOR_TERMS))


def _build_registry() -> Dict[str, Callable]:
    registry = {f"color/{op.value}": _color(op) for op in ColorOp}
    registry.update({f"filter/{op.value}": _filter(op) for op in FilterOp})
    registry.update({f"fft/{op.value}": _frequency(op) for op in FrequencyOp})
    registry.update({f"geometric/{op.value}": _geometry(op) for op in GeometryOp})
    registry['fourier_desc'] = _descriptor
    return registry


_UNARY_COMMANDS = _build_registry()
BINARY_COMMANDS = {f"binary_op/{op.value}": op for op in ArithmeticOp}
COMMANDS = sorted(list(_UNARY_COMMANDS) + list(BINARY_COMMANDS))


def transform_image(
    command: str,
    image: RasterImage,
    arg: Optional[str] = None,
    other: Optional[RasterImage] = None
) -> RasterImage:
    """
    Run one named command.

    `arg` is the raw argument text; `other` is the second operand required
    by the binary_op/* commands.
    """
    timer = Timer()
    if command in BINARY_COMMANDS:
        if other is None:
            raise InvalidArguments(command, "a second image is required")
        result = timer.measure(apply_binary_arithmetic, BINARY_COMMANDS[command], image, other)
    elif command in _UNARY_COMMANDS:
        result = timer.measure(_UNARY_COMMANDS[command], command, image, arg)
    else:
        raise InvalidOperation(command, "unknown command")

    logger.info("%s %r -> %r in %.2f ms", command, image, result, timer.elapsed_ms)
    return result
