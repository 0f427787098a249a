"""Image-transform engines - pure computation, no I/O."""

from .errors import TransformError, DecodeError, InvalidOperation, InvalidArguments, UnsupportedFormat
from .pixel_access import sample, convolve, to_uint8
from .color_space import to_gray, to_rgb
from .arithmetic import apply_binary_arithmetic
from .tone import apply_color, to_binary, invert, exponential, hist_equalize
from .spatial_filter import apply_filter, gaussian_kernel
from .frequency import apply_frequency, dft2d, fft1d, ifft1d
from .fourier_descriptor import reconstruct_descriptor
from .geometry import apply_geometry, translate, rotate, resize, mirror, stretch
from .commands import transform_image, COMMANDS

__all__ = [
    'TransformError',
    'DecodeError',
    'InvalidOperation',
    'InvalidArguments',
    'UnsupportedFormat',
    'sample',
    'convolve',
    'to_uint8',
    'to_gray',
    'to_rgb',
    'apply_binary_arithmetic',
    'apply_color',
    'to_binary',
    'invert',
    'exponential',
    'hist_equalize',
    'apply_filter',
    'gaussian_kernel',
    'apply_frequency',
    'dft2d',
    'fft1d',
    'ifft1d',
    'reconstruct_descriptor',
    'apply_geometry',
    'translate',
    'rotate',
    'resize',
    'mirror',
    'stretch',
    'transform_image',
    'COMMANDS',
]
