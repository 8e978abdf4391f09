"""
Conversion between coefficient tables and :class:`~healpix_alm.alm.Alm`.

A table has one row per stored coefficient and three columns:

    index  int64    l**2 + l + m + 1 (1-based)
    real   float64  Re(a_lm)
    imag   float64  Im(a_lm)

Rows may come in any order. The functions here work on plain arrays; the
file formats live in :mod:`healpix_alm.fits_io` and :mod:`healpix_alm.text_io`.
"""

from __future__ import annotations

import logging

import numpy as np

from .alm import Alm
from .errors import MalformedTableError
from .indexing import alm_index, lm_to_table_index, table_index_to_lm

__all__ = ["decode_alm_table", "encode_alm_table"]

logger = logging.getLogger(__name__)


def decode_alm_table(index, real, imag, dtype=None) -> Alm:
    """
    Build an :class:`Alm` from parallel ``index``/``real``/``imag`` columns.

    ``lmax`` and ``mmax`` are the largest decoded degree and order; slots with
    no matching row stay zero.

    Args:
        index: 1-based dense indices ``l**2 + l + m + 1``.
        real: Real parts.
        imag: Imaginary parts.
        dtype: Complex dtype of the result (default ``config.DEFAULT_ALM_DTYPE``).

    Raises:
        MalformedTableError: On empty or ragged columns, indices < 1,
            a negative decoded order, or duplicate indices.
        TypeError: If ``dtype`` is not complex.
    """
    index = np.asarray(index, dtype=np.int64).ravel()
    real = np.asarray(real, dtype=np.float64).ravel()
    imag = np.asarray(imag, dtype=np.float64).ravel()

    if dtype is not None and not np.issubdtype(np.dtype(dtype), np.complexfloating):
        raise TypeError(f"Table coefficients need a complex dtype, got {np.dtype(dtype)}")
    if index.size == 0:
        raise MalformedTableError("Coefficient table is empty")
    if not (index.size == real.size == imag.size):
        raise MalformedTableError(
            f"Column lengths differ: index={index.size}, real={real.size}, imag={imag.size}"
        )

    l, m = table_index_to_lm(index)  # noqa: E741
    negative = m < 0
    if np.any(negative):
        raise MalformedTableError(
            f"{int(negative.sum())} rows decode to a negative order "
            f"(first bad index: {int(index[negative][0])})"
        )
    if np.unique(index).size != index.size:
        raise MalformedTableError("Coefficient table contains duplicate indices")

    result = Alm(int(l.max()), int(m.max()), dtype=dtype)
    offsets = alm_index(result, l, m)
    result.values[offsets] = real + 1j * imag

    logger.debug(
        "Decoded %d rows into lmax=%d, mmax=%d (%d slots)",
        index.size,
        result.lmax,
        result.mmax,
        len(result),
    )
    return result


def encode_alm_table(alm: Alm) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(index, real, imag)`` columns for every stored coefficient, in storage order."""
    l, m = alm.lm  # noqa: E741
    index = np.asarray(lm_to_table_index(l, m), dtype=np.int64)
    real = np.real(alm.values).astype(np.float64)
    imag = np.imag(alm.values).astype(np.float64)
    return index, real, imag
