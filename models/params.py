"""Parameter structs for multi-parameter operations."""

from dataclasses import dataclass
from typing import Optional

from utils.constants import (
    DEFAULT_KERNEL_SIZE,
    DEFAULT_GAUSSIAN_SIGMA,
    DEFAULT_HOMOMORPHIC_R_L,
    DEFAULT_HOMOMORPHIC_R_H,
    DEFAULT_HOMOMORPHIC_C,
    DEFAULT_HOMOMORPHIC_D0,
    DEFAULT_MIRROR_AXIS,
)


@dataclass
class GaussianParams:
    """Gaussian smoothing window."""

    kernel_size: int = DEFAULT_KERNEL_SIZE
    sigma: float = DEFAULT_GAUSSIAN_SIGMA


@dataclass
class HomomorphicParams:
    """
    High-emphasis filter H(D) = (r_h - r_l) * (1 - exp(-c * (D / d0)^2)) + r_l.

    r_l scales the illumination (low-frequency) band, r_h the reflectance
    (high-frequency) band, c the slope and d0 the cutoff radius.
    """

    r_l: float = DEFAULT_HOMOMORPHIC_R_L
    r_h: float = DEFAULT_HOMOMORPHIC_R_H
    c: float = DEFAULT_HOMOMORPHIC_C
    d0: float = DEFAULT_HOMOMORPHIC_D0


@dataclass
class TranslateParams:
    dx: int = 0
    dy: int = 0


@dataclass
class RotateParams:
    angle: float = 0.0  # degrees


@dataclass
class ResizeParams:
    """Target size; None keeps the current dimension."""

    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class StretchParams:
    sx: float = 1.0
    sy: float = 1.0


@dataclass
class MirrorParams:
    axis: str = DEFAULT_MIRROR_AXIS
