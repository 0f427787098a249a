"""Kernel tables and documented operation defaults."""

import numpy as np

# Kernels are indexed [i][j] where i steps along x and j along y,
# i.e. kernel[i][j] weighs the sample at (x + i - k, y + j - k).

SOBEL_KERNELS = {
    'h': np.array([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]]),
    'v': np.array([[-1, -2, -1], [0, 0, 0], [1, 2, 1]]),
}

PREWITT_KERNELS = {
    'h': np.array([[-1, 0, 1], [-1, 0, 1], [-1, 0, 1]]),
    'v': np.array([[-1, -1, -1], [0, 0, 0], [1, 1, 1]]),
}

ROBERTS_KERNELS = {
    '\\': np.array([[-1, 0], [0, 1]]),
    '/': np.array([[0, -1], [1, 0]]),
}

LAPLACIAN_KERNELS = {
    4: np.array([[0, 1, 0], [1, -4, 1], [0, 1, 0]]),
    8: np.array([[1, 1, 1], [1, -8, 1], [1, 1, 1]]),
}

# Tone
DEFAULT_BINARY_THRESHOLD = 0.5
DEFAULT_EXPONENT = 1.0

# Spatial filters
DEFAULT_KERNEL_SIZE = 3
DEFAULT_GAUSSIAN_SIGMA = 1.0
DEFAULT_LAPLACIAN_NEIGHBORS = 4

# Homomorphic filter
DEFAULT_HOMOMORPHIC_R_L = 0.3
DEFAULT_HOMOMORPHIC_R_H = 2.0
DEFAULT_HOMOMORPHIC_C = 2.0
DEFAULT_HOMOMORPHIC_D0 = 10.0

# Fourier descriptors
DESCRIPTOR_THRESHOLD = 128
DEFAULT_DESCRIPTOR_TERMS = 64
DESCRIPTOR_STAMP_SIZE = 3

# Geometry
DEFAULT_MIRROR_AXIS = 'x'
