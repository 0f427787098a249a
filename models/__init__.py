"""Data models: raster images, operation enums and parameter structs."""

from .raster import RasterImage, PixelFormat
from .operations import ColorOp, ArithmeticOp, FilterOp, FrequencyOp, GeometryOp
from .params import (
    GaussianParams,
    HomomorphicParams,
    TranslateParams,
    RotateParams,
    ResizeParams,
    StretchParams,
    MirrorParams,
)

__all__ = [
    'RasterImage',
    'PixelFormat',
    'ColorOp',
    'ArithmeticOp',
    'FilterOp',
    'FrequencyOp',
    'GeometryOp',
    'GaussianParams',
    'HomomorphicParams',
    'TranslateParams',
    'RotateParams',
    'ResizeParams',
    'StretchParams',
    'MirrorParams',
]
