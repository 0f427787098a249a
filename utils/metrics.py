"""Metrics: PSNR, SSIM, runtime."""

import time
from typing import Dict

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity

from models.raster import RasterImage


def compute_psnr_ssim(original: RasterImage, processed: RasterImage) -> Dict[str, float]:
    """
    PSNR and SSIM between two images of equal size. Mixed formats are
    compared on luminance (BT.601).
    """
    if (original.width, original.height) != (processed.width, processed.height):
        raise ValueError(
            f"Size mismatch: {original.width}x{original.height} vs {processed.width}x{processed.height}"
        )

    a, b = original.pixels, processed.pixels
    if original.is_gray != processed.is_gray:
        a, b = _luma(a), _luma(b)

    if np.array_equal(a, b):
        return {'psnr': float('inf'), 'ssim': 1.0}

    psnr = peak_signal_noise_ratio(a, b, data_range=255)

    # SSIM needs a 7x7 window unless the image is smaller
    win_size = min(7, a.shape[0], a.shape[1])
    if win_size % 2 == 0:
        win_size -= 1
    if win_size < 3:
        ssim = float('nan')
    else:
        ssim = structural_similarity(
            a, b, data_range=255, win_size=win_size,
            channel_axis=2 if a.ndim == 3 else None
        )

    return {'psnr': float(psnr), 'ssim': float(ssim)}


def _luma(pixels: np.ndarray) -> np.ndarray:
    if pixels.ndim == 2:
        return pixels
    luma = 0.299 * pixels[:, :, 0] + 0.587 * pixels[:, :, 1] + 0.114 * pixels[:, :, 2]
    return np.clip(np.round(luma), 0, 255).astype(np.uint8)


class Timer:
    """Simple timer for engine calls."""

    def __init__(self):
        self.elapsed_ms = 0.0

    def measure(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.elapsed_ms = (time.perf_counter() - start) * 1000.0
        return result
