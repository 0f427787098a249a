"""Raster image container."""

from dataclasses import dataclass
from enum import Enum

import numpy as np


class PixelFormat(str, Enum):
    """Pixel layout of a raster image."""

    LUMA8 = 'L8'
    RGB8 = 'RGB8'


@dataclass(frozen=True, eq=False)
class RasterImage:
    """
    Width x height grid of 8-bit samples, either single-channel luminance
    or 3-channel RGB. The buffer is copied on construction and made
    read-only, so every engine operation allocates its own output.
    """

    pixels: np.ndarray  # (H, W) for LUMA8, (H, W, 3) for RGB8, dtype uint8

    def __post_init__(self):
        pixels = np.asarray(self.pixels)
        if pixels.dtype != np.uint8:
            raise ValueError(f"Pixels must be uint8, got {pixels.dtype}")
        if pixels.ndim == 3 and pixels.shape[2] == 1:
            pixels = pixels[:, :, 0]
        if not (pixels.ndim == 2 or (pixels.ndim == 3 and pixels.shape[2] == 3)):
            raise ValueError(f"Pixels must be (H, W) or (H, W, 3), got {pixels.shape}")
        if pixels.shape[0] < 1 or pixels.shape[1] < 1:
            raise ValueError(f"Image must be at least 1x1, got {pixels.shape[1]}x{pixels.shape[0]}")

        pixels = np.array(pixels, copy=True)
        pixels.setflags(write=False)
        object.__setattr__(self, 'pixels', pixels)

    @classmethod
    def blank(cls, width: int, height: int, fmt: PixelFormat = PixelFormat.LUMA8) -> 'RasterImage':
        """Zero-filled (black) image."""
        shape = (height, width) if fmt is PixelFormat.LUMA8 else (height, width, 3)
        return cls(np.zeros(shape, dtype=np.uint8))

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def format(self) -> PixelFormat:
        return PixelFormat.LUMA8 if self.pixels.ndim == 2 else PixelFormat.RGB8

    @property
    def is_gray(self) -> bool:
        return self.pixels.ndim == 2

    @property
    def channels(self) -> int:
        return 1 if self.is_gray else 3

    def same_pixels(self, other: 'RasterImage') -> bool:
        """True when both images have the same format, size and bytes."""
        return self.format is other.format and np.array_equal(self.pixels, other.pixels)

    def __repr__(self) -> str:
        return f"RasterImage({self.width}x{self.height}, {self.format.value})"
