"""Boundary smoothing by Fourier-descriptor truncation."""

import logging
from typing import List

import cv2
import numpy as np

from models.raster import RasterImage
from engines.color_space import luminance
from engines.frequency import fft1d, ifft1d
from engines.pixel_access import round_half_away
from engines.tone import invert
from utils.constants import DESCRIPTOR_THRESHOLD, DEFAULT_DESCRIPTOR_TERMS, DESCRIPTOR_STAMP_SIZE

logger = logging.getLogger(__name__)


def trace_contours(gray: np.ndarray, threshold: int = DESCRIPTOR_THRESHOLD) -> List[np.ndarray]:
    """
    Binarize at v > threshold and follow every border (outer and hole).
    Each contour is an (N, 2) int array of (x, y) boundary pixels.
    """
    binary = np.where(gray > threshold, 255, 0).astype(np.uint8)
    contours, _ = cv2.findContours(binary, cv2.RETR_LIST, cv2.CHAIN_APPROX_NONE)
    return [contour.reshape(-1, 2) for contour in contours]


def truncate_spectrum(spectrum: np.ndarray, nterms: int) -> np.ndarray:
    """
    Keep the nterms lowest frequencies of an unshifted spectrum by zeroing
    the contiguous middle block [nterms // 2, nterms // 2 + len - nterms).
    """
    length = len(spectrum)
    nterms = min(max(int(nterms), 1), length)
    truncated = spectrum.copy()
    start = nterms // 2
    truncated[start:start + length - nterms] = 0
    return truncated


def _fit_extent(points: np.ndarray, original: np.ndarray) -> np.ndarray:
    """
    Uniformly rescale a complex point cloud so its larger bounding-box side
    matches the original's, anchored at the original min corner.
    """
    min_x, min_y = original.real.min(), original.imag.min()
    scale = max(original.real.max() - min_x, original.imag.max() - min_y)

    rec_min_x, rec_min_y = points.real.min(), points.imag.min()
    rec_scale = max(points.real.max() - rec_min_x, points.imag.max() - rec_min_y)
    if rec_scale <= 0:
        return np.full(points.shape, complex(min_x, min_y))

    xs = (points.real - rec_min_x) / rec_scale * scale + min_x
    ys = (points.imag - rec_min_y) / rec_scale * scale + min_y
    return xs + 1j * ys


def _stamp(canvas: np.ndarray, points: np.ndarray, size: int = DESCRIPTOR_STAMP_SIZE) -> None:
    half = size // 2
    height, width = canvas.shape
    xs = round_half_away(points.real).astype(np.int64)
    ys = round_half_away(points.imag).astype(np.int64)
    for x, y in zip(xs, ys):
        top, left = max(y - half, 0), max(x - half, 0)
        bottom, right = min(y - half + size, height), min(x - half + size, width)
        if top < bottom and left < right:
            canvas[top:bottom, left:right] = 255


def reconstruct_descriptor(image: RasterImage, nterms: int = DEFAULT_DESCRIPTOR_TERMS) -> RasterImage:
    """
    Trace the largest boundary, keep nterms Fourier terms of its x + iy
    sequence, rescale the reconstruction onto the original extent and draw
    it as dark 3x3 stamps on a light canvas the size of the input.
    """
    gray = luminance(image)
    canvas = np.zeros(gray.shape, dtype=np.uint8)

    contours = trace_contours(gray)
    if not contours:
        logger.debug("No boundary found in %r, returning blank canvas", image)
        return invert(RasterImage(canvas))

    contour = max(contours, key=len)
    points = contour[:, 0].astype(np.float64) + 1j * contour[:, 1].astype(np.float64)
    logger.debug("Reconstructing %d-point contour with %d terms", len(points), nterms)

    reconstructed = ifft1d(truncate_spectrum(fft1d(points), nterms))
    _stamp(canvas, _fit_extent(reconstructed, points))
    return invert(RasterImage(canvas))
