"""Enumerated engine operations."""

from enum import Enum


class ColorOp(str, Enum):
    INVERT = 'invert'
    EXPONENTIAL = 'exponential'
    HIST_EQUALIZE = 'hist_equalize'
    TO_GRAY = 'to_gray'
    TO_BINARY = 'to_binary'


class ArithmeticOp(str, Enum):
    ADD = 'add'
    SUB = 'sub'
    MUL = 'mul'
    DIV = 'div'


class FilterOp(str, Enum):
    MEAN = 'mean'
    MEDIAN = 'median'
    GAUSSIAN = 'gaussian'
    SOBEL = 'sobel'
    PREWITT = 'prewitt'
    ROBERTS = 'roberts'
    LAPLACIAN = 'laplacian'
    SOBEL_SHARPEN = 'sobel_sharpen'
    PREWITT_SHARPEN = 'prewitt_sharpen'
    ROBERTS_SHARPEN = 'roberts_sharpen'
    LAPLACIAN_SHARPEN = 'laplacian_sharpen'


class FrequencyOp(str, Enum):
    DFT = 'dft'
    DFT_NON_SHIFTED = 'dft_non_shifted'
    DFT_NO_LOG = 'dft_no_log'
    IDFT = 'idft'
    IDFT_NON_SHIFTED = 'idft_non_shifted'
    SHIFT_TO_CENTER = 'shift_to_center'
    HOMOMORPHIC = 'homomorphic'
    DFT_IDFT = 'dft_idft'


class GeometryOp(str, Enum):
    TRANSLATE = 'translate'
    ROTATE = 'rotate'
    RESIZE = 'resize'
    MIRROR = 'mirror'
    STRETCH = 'stretch'
