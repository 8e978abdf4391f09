"""
Central configuration constants for the a_lm coefficient package.
"""

import numpy as np

# ========== Coefficient storage ==========
DEFAULT_ALM_DTYPE = np.complex128  # one complex coefficient per (l, m)
UNSEEN = -1.6375e30  # sentinel for unobserved pixels in HEALPix maps

# ========== FITS table layout ==========
FITS_ALM_HDU = 1  # first extension holds the coefficient table
FITS_INDEX_COLUMN = "INDEX"  # l^2 + l + m + 1
FITS_REAL_COLUMN = "REAL"
FITS_IMAG_COLUMN = "IMAG"
FITS_INDEX_FORMAT = "K"  # 64-bit integer
FITS_VALUE_FORMAT = "D"  # 64-bit float
FITS_LMAX_KEYWORD = "MAX-LPOL"
FITS_MMAX_KEYWORD = "MAX-MPOL"
FITS_SUFFIXES = (".fits", ".fit", ".fts", ".fits.gz", ".fit.gz")

# ========== Text table layout ==========
TEXT_COLUMNS = ["index", "real", "imag"]
TEXT_SEPARATOR = " "
TEXT_FLOAT_FORMAT = "%.17e"  # round-trips float64 exactly

# ========== Spectrum output ==========
DEFAULT_CL_OUTPUT = "cl.npz"
CL_TEXT_HEADER = "ell cl"

# ========== Logging ==========
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
