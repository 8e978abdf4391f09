"""
Index arithmetic for triangular a_lm storage.

Coefficients are stored m-major: for each order ``m = 0..mmax`` the degrees
``l = m..lmax`` occupy one contiguous block. The offset of ``(l, m)`` is

    offset = m * (2 * lmax + 1 - m) // 2 + l

which needs no lookup table. Block ``m`` holds ``lmax - m + 1`` entries, so
its first slot is ``sum_{k<m} (lmax - k + 1) = m * (2 * lmax + 3 - m) // 2``;
subtracting ``m`` gives the expression above. Nothing in it depends on
``mmax``, so the same formula addresses truncated sets (``mmax < lmax``):
the last block ends at ``number_of_alms(lmax, mmax) - 1``.

Offsets are 0-based positions into :attr:`Alm.values`.

Tables on disk use a different, dense 1-based index, ``l**2 + l + m + 1``,
handled by :func:`lm_to_table_index` and :func:`table_index_to_lm`.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from .errors import InvalidBoundsError, MalformedTableError

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from .alm import Alm

__all__ = [
    "alm_index",
    "alm_index_l0",
    "alm_lm",
    "lm_to_table_index",
    "lmax_from_num_of_alm",
    "number_of_alms",
    "table_index_to_lm",
]


def _as_index(value):
    """Return a Python int for scalars and an int64 array otherwise."""
    if np.ndim(value) == 0:
        return int(value)
    return np.asarray(value, dtype=np.int64)


def number_of_alms(lmax: int, mmax: int | None = None) -> int:
    """
    Return the number of coefficients needed for ``0 <= m <= min(l, mmax)``.

    Args:
        lmax: Maximum degree.
        mmax: Maximum order; defaults to ``lmax`` (full triangle).

    Raises:
        InvalidBoundsError: If ``lmax`` or ``mmax`` is negative or ``mmax > lmax``.
    """
    lmax = int(lmax)
    mmax = lmax if mmax is None else int(mmax)
    if lmax < 0:
        raise InvalidBoundsError(f"lmax must be >= 0, got {lmax}", lmax, mmax)
    if mmax < 0:
        raise InvalidBoundsError(f"mmax must be >= 0, got {mmax}", lmax, mmax)
    if mmax > lmax:
        raise InvalidBoundsError(
            f"lmax ({lmax}) and mmax ({mmax}) are inconsistent", lmax, mmax
        )
    return (mmax + 1) * (mmax + 2) // 2 + (mmax + 1) * (lmax - mmax)


def lmax_from_num_of_alm(nalm: int, mmax: int | None = None) -> int:
    """Invert :func:`number_of_alms` for a known ``mmax`` (or a full triangle)."""
    nalm = int(nalm)
    if nalm < 1:
        raise InvalidBoundsError(f"Invalid number of coefficients: {nalm}")

    if mmax is None:
        lmax = (math.isqrt(8 * nalm + 1) - 3) // 2
        if number_of_alms(lmax) != nalm:
            raise InvalidBoundsError(
                f"{nalm} coefficients do not form a full triangle"
            )
        return lmax

    mmax = int(mmax)
    if mmax < 0:
        raise InvalidBoundsError(f"mmax must be >= 0, got {mmax}", mmax=mmax)
    head = (mmax + 1) * (mmax + 2) // 2
    extra, remainder = divmod(nalm - head, mmax + 1)
    if nalm < head or remainder:
        raise InvalidBoundsError(
            f"{nalm} coefficients are inconsistent with mmax={mmax}", mmax=mmax
        )
    return mmax + extra


def alm_index_l0(alm: "Alm", m):
    """Offset of ``(0, m)`` extrapolated from block ``m``; add ``l`` to address ``(l, m)``."""
    m = _as_index(m)
    return (m * (alm.tval - m)) >> 1


def alm_index(alm: "Alm", l, m):  # noqa: E741
    """
    Return the storage offset(s) of ``(l, m)`` inside ``alm.values``.

    ``l`` and ``m`` may be scalars or equal-length integer arrays; arrays are
    processed element-wise without per-row branching. No bounds check is made:
    callers must keep ``m <= alm.mmax`` and ``m <= l <= alm.lmax``.
    """
    return alm_index_l0(alm, m) + _as_index(l)


def alm_lm(lmax: int, mmax: int | None = None) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(l, m)`` arrays listing every stored pair in storage order."""
    mmax = lmax if mmax is None else mmax
    number_of_alms(lmax, mmax)

    orders = np.arange(mmax + 1, dtype=np.int64)
    m = np.repeat(orders, lmax + 1 - orders)
    l = np.concatenate([np.arange(order, lmax + 1, dtype=np.int64) for order in orders])  # noqa: E741
    return l, m


def lm_to_table_index(l, m):  # noqa: E741
    """Dense 1-based table index ``l**2 + l + m + 1``."""
    l = _as_index(l)  # noqa: E741
    return l * l + l + _as_index(m) + 1


def table_index_to_lm(index) -> tuple[np.ndarray, np.ndarray]:
    """
    Decode ``(l, m)`` from the dense 1-based table index.

    ``l = floor(sqrt(index - 1))`` and ``m = index - l**2 - l - 1``. The float
    square root is corrected in integer arithmetic so large indices decode
    exactly. Negative ``m`` values are returned as-is; rejecting them is up to
    the caller.

    Raises:
        MalformedTableError: If any index is smaller than 1.
    """
    index = np.atleast_1d(np.asarray(index, dtype=np.int64))
    if index.size and index.min() < 1:
        raise MalformedTableError(
            f"Table index must be >= 1, found {int(index.min())}"
        )

    shifted = index - 1
    l = np.floor(np.sqrt(shifted.astype(np.float64))).astype(np.int64)  # noqa: E741
    l -= (l * l > shifted).astype(np.int64)
    l += ((l + 1) * (l + 1) <= shifted).astype(np.int64)
    m = index - l * l - l - 1
    return l, m
