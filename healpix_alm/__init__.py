"""
Spherical harmonic coefficient (a_lm) storage and angular power spectra.

This package provides:
- Triangular a_lm index arithmetic
- The Alm coefficient container
- C_l estimation from one or two coefficient sets
- FITS and text table I/O for coefficient files
"""

from .alm import Alm
from .config import UNSEEN
from .errors import (
    AlmError,
    IncompatibleAlmError,
    InvalidBoundsError,
    LengthMismatchError,
    MalformedTableError,
)
from .file_ops import read_alm, write_alm
from .fits_io import read_alm_from_fits, write_alm_to_fits
from .indexing import (
    alm_index,
    alm_index_l0,
    alm_lm,
    lm_to_table_index,
    lmax_from_num_of_alm,
    number_of_alms,
    table_index_to_lm,
)
from .spectrum import alm2cl
from .table import decode_alm_table, encode_alm_table
from .text_io import read_alm_from_text, write_alm_to_text

__all__ = [
    "Alm",
    "AlmError",
    "IncompatibleAlmError",
    "InvalidBoundsError",
    "LengthMismatchError",
    "MalformedTableError",
    "UNSEEN",
    "alm2cl",
    "alm_index",
    "alm_index_l0",
    "alm_lm",
    "decode_alm_table",
    "encode_alm_table",
    "lm_to_table_index",
    "lmax_from_num_of_alm",
    "number_of_alms",
    "read_alm",
    "read_alm_from_fits",
    "read_alm_from_text",
    "table_index_to_lm",
    "write_alm",
    "write_alm_to_fits",
    "write_alm_to_text",
]
