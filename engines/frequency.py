"""2D DFT/IDFT, spectrum display, quadrant shift and homomorphic filtering."""

import logging
from typing import Optional, Union

import numpy as np
from scipy import fft as sfft

from models.operations import FrequencyOp
from models.params import HomomorphicParams
from models.raster import RasterImage
from engines.color_space import luminance
from engines.errors import InvalidOperation
from engines.pixel_access import to_uint8

logger = logging.getLogger(__name__)


def fft1d(samples: np.ndarray) -> np.ndarray:
    """Forward 1D DFT of a complex sequence (unnormalized)."""
    return sfft.fft(np.asarray(samples, dtype=np.complex128))


def ifft1d(spectrum: np.ndarray) -> np.ndarray:
    """Inverse 1D DFT, divided by the sequence length."""
    return sfft.ifft(np.asarray(spectrum, dtype=np.complex128))


def dft2d(samples: np.ndarray, inverse: bool = False) -> np.ndarray:
    """
    Separable 2D (I)DFT: a 1D pass over every row, then over every column
    of the row-transformed grid. The inverse divides by the width after the
    row pass and by the height after the column pass, so a forward/inverse
    pair round-trips.
    """
    data = np.asarray(samples, dtype=np.complex128)
    transform = sfft.ifft if inverse else sfft.fft
    rows_done = transform(data, axis=1)
    return transform(rows_done, axis=0)


def shift_quadrants(grid: np.ndarray) -> np.ndarray:
    """Move (x, y) to (x + W/2 mod W, y + H/2 mod H), centering the zero frequency."""
    return sfft.fftshift(grid)


def magnitude_display(spectrum: np.ndarray, with_log: bool = True) -> np.ndarray:
    """
    Scale |F| (or log(1 + |F|)) by c = 255 / max over the whole grid.
    The constant depends on the full spectrum, so it is taken before any
    pixel is written. An all-zero spectrum renders black.
    """
    values = np.abs(spectrum)
    if with_log:
        values = np.log1p(values)
    peak = values.max()
    if peak <= 0:
        return np.zeros(values.shape, dtype=np.uint8)
    return to_uint8(values * (255.0 / peak))


def _samples(image: RasterImage) -> np.ndarray:
    return luminance(image).astype(np.float64)


def dft(image: RasterImage, shift: bool = True, with_log: bool = True) -> RasterImage:
    """Display of the forward transform of the luminance plane."""
    display = magnitude_display(dft2d(_samples(image)), with_log)
    if shift:
        display = shift_quadrants(display)
    return RasterImage(display)


def dft_non_shifted(image: RasterImage) -> RasterImage:
    return dft(image, shift=False)


def dft_no_log(image: RasterImage) -> RasterImage:
    return dft(image, with_log=False)


def idft(image: RasterImage, shift: bool = True) -> RasterImage:
    """Real part of the inverse transform of the luminance plane, clamped."""
    display = to_uint8(dft2d(_samples(image), inverse=True).real)
    if shift:
        display = shift_quadrants(display)
    return RasterImage(display)


def idft_non_shifted(image: RasterImage) -> RasterImage:
    return idft(image, shift=False)


def shift_to_center(image: RasterImage) -> RasterImage:
    """Quadrant swap of the luminance plane."""
    return RasterImage(shift_quadrants(luminance(image)))


def dft_idft(image: RasterImage) -> RasterImage:
    """Forward then inverse transform with nothing in between."""
    restored = dft2d(dft2d(_samples(image)), inverse=True)
    return RasterImage(to_uint8(restored.real))


def homomorphic_filter(height: int, width: int, params: HomomorphicParams) -> np.ndarray:
    """
    Radially symmetric high-emphasis filter in the unshifted layout.

    Built around (W/2, H/2) and then quadrant-swapped so the low band lands
    on the zero frequency at the origin.
    """
    yy, xx = np.meshgrid(np.arange(height), np.arange(width), indexing='ij')
    distance = np.sqrt((yy - height / 2.0) ** 2 + (xx - width / 2.0) ** 2)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        emphasis = 1.0 - np.exp(-params.c * (distance / params.d0) ** 2)
    emphasis = np.nan_to_num(emphasis, nan=0.0)
    centered = (params.r_h - params.r_l) * emphasis + params.r_l
    return shift_quadrants(centered)


def homomorphic(image: RasterImage, params: Optional[HomomorphicParams] = None) -> RasterImage:
    """
    Illumination/reflectance separation: ln(v + 1), forward transform,
    multiply by the high-emphasis filter, inverse transform, exp(.) - 1,
    then stretch the global min..max to 0..255.
    """
    params = params or HomomorphicParams()
    samples = _samples(image)
    height, width = samples.shape

    spectrum = dft2d(np.log(samples + 1.0))
    spectrum *= homomorphic_filter(height, width, params)
    restored = dft2d(spectrum, inverse=True)

    with np.errstate(over='ignore', invalid='ignore'):
        exp_data = np.exp(restored).real - 1.0
    exp_data = np.nan_to_num(exp_data, nan=0.0, posinf=np.finfo(np.float64).max)

    low, high = exp_data.min(), exp_data.max()
    span = high - low
    if not np.isfinite(span) or span <= 1e-9 * max(1.0, abs(high)):
        # Flat result carries no range to stretch; keep the input level.
        logger.debug("Homomorphic output has no dynamic range, returning input mean")
        return RasterImage(np.full(samples.shape, to_uint8(samples.mean()), dtype=np.uint8))

    return RasterImage(to_uint8((exp_data - low) / span * 255.0))


def apply_frequency(
    op: Union[FrequencyOp, str],
    image: RasterImage,
    params: Optional[HomomorphicParams] = None
) -> RasterImage:
    """Run a frequency-domain operation; params only applies to homomorphic."""
    try:
        op = FrequencyOp(op)
    except ValueError:
        raise InvalidOperation(str(op), "unknown frequency-domain operation") from None

    logger.debug("Frequency %s on %r", op.value, image)
    if op is FrequencyOp.HOMOMORPHIC:
        return homomorphic(image, params)
    return {
        FrequencyOp.DFT: dft,
        FrequencyOp.DFT_NON_SHIFTED: dft_non_shifted,
        FrequencyOp.DFT_NO_LOG: dft_no_log,
        FrequencyOp.IDFT: idft,
        FrequencyOp.IDFT_NON_SHIFTED: idft_non_shifted,
        FrequencyOp.SHIFT_TO_CENTER: shift_to_center,
        FrequencyOp.DFT_IDFT: dft_idft,
    }[op](image)
