"""Shared utilities. Image I/O lives in utils.image_io and is imported directly."""

from .metrics import compute_psnr_ssim, Timer
from .test_images import (
    generate_checkerboard,
    generate_gradient,
    generate_disk,
    generate_rectangle,
    generate_color_bars,
    generate_demo_image,
    DEMO_IMAGES,
)

__all__ = [
    'compute_psnr_ssim',
    'Timer',
    'generate_checkerboard',
    'generate_gradient',
    'generate_disk',
    'generate_rectangle',
    'generate_color_bars',
    'generate_demo_image',
    'DEMO_IMAGES',
]
