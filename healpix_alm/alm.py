"""Container for a triangular set of spherical harmonic coefficients a_lm."""

from __future__ import annotations

import numpy as np

from . import config
from .errors import LengthMismatchError
from .indexing import alm_index, alm_lm, number_of_alms

__all__ = ["Alm"]


class Alm:
    """
    Spherical harmonic coefficients a_lm for ``0 <= m <= min(l, mmax)``, ``l <= lmax``.

    Only non-negative orders are stored: for a real field
    ``a_{l,-m} = (-1)^m conj(a_{l,m})``. Coefficients live in a flat 1-D array
    addressed with :func:`~healpix_alm.indexing.alm_index`.

    The element type is meant to be complex (``config.DEFAULT_ALM_DTYPE``), but
    any numeric dtype is accepted; a real-valued set is unusual but legal.

    When ``values`` is given it is adopted without copying, so views and
    memory-mapped arrays can serve as backing storage. The caller hands over
    the array and should not keep writing to it through other references.

    Reads from several threads are safe. Replacing :attr:`values` is not
    synchronized; callers must serialize it themselves.

    Attributes:
        lmax: Maximum degree (read-only).
        mmax: Maximum order (read-only).
        tval: Cached ``2 * lmax + 1`` used by the index formula (read-only).
    """

    __slots__ = ("_values", "_lmax", "_mmax", "_tval")

    def __init__(
        self,
        lmax: int,
        mmax: int | None = None,
        values: np.ndarray | None = None,
        dtype=None,
    ) -> None:
        lmax = int(lmax)
        mmax = lmax if mmax is None else int(mmax)
        n_alm = number_of_alms(lmax, mmax)

        self._lmax = lmax
        self._mmax = mmax
        self._tval = 2 * lmax + 1

        if values is None:
            if dtype is None:
                dtype = config.DEFAULT_ALM_DTYPE
            self._values = np.zeros(n_alm, dtype=dtype)
        else:
            self._values = self._checked(values, n_alm, dtype)

    @staticmethod
    def _checked(values, n_alm: int, dtype=None) -> np.ndarray:
        if not isinstance(values, np.ndarray) or dtype is not None:
            values = np.asarray(values, dtype=dtype)
        if values.ndim != 1:
            raise LengthMismatchError(
                f"a_lm array must be one-dimensional, got shape {values.shape}",
                expected=n_alm,
                actual=values.size,
            )
        if values.size != n_alm:
            raise LengthMismatchError(
                f"a_lm array has {values.size} elements instead of {n_alm}",
                expected=n_alm,
                actual=values.size,
            )
        return values

    @property
    def lmax(self) -> int:
        return self._lmax

    @property
    def mmax(self) -> int:
        return self._mmax

    @property
    def tval(self) -> int:
        return self._tval

    @property
    def values(self) -> np.ndarray:
        """The backing coefficient array."""
        return self._values

    @values.setter
    def values(self, new_values: np.ndarray) -> None:
        # Bulk replacement keeps the size invariant; the old array stays on failure.
        self._values = self._checked(new_values, self._values.size)

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    @property
    def lm(self) -> tuple[np.ndarray, np.ndarray]:
        """``(l, m)`` arrays in storage order."""
        return alm_lm(self._lmax, self._mmax)

    def index(self, l, m):  # noqa: E741
        """Storage offset(s) of ``(l, m)``; see :func:`~healpix_alm.indexing.alm_index`."""
        return alm_index(self, l, m)

    def __getitem__(self, key):
        l, m = key  # noqa: E741
        return self._values[alm_index(self, l, m)]

    def __setitem__(self, key, value) -> None:
        l, m = key  # noqa: E741
        self._values[alm_index(self, l, m)] = value

    def __len__(self) -> int:
        return self._values.size

    def copy(self) -> "Alm":
        """Return a deep copy that owns its own array."""
        return Alm(self._lmax, self._mmax, self._values.copy())

    def __repr__(self) -> str:
        return (
            f"Alm(lmax={self._lmax}, mmax={self._mmax}, "
            f"n_alm={self._values.size}, dtype={self._values.dtype})"
        )
