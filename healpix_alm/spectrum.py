"""
Angular power spectra from spherical harmonic coefficients.

For a real field only ``m >= 0`` is stored and ``a_{l,-m}`` is the conjugate
of ``a_{l,m}`` up to a sign, so each ``m > 0`` term appears twice in the sum
over orders while ``m = 0`` appears once:

    C_l = [Re(a_l0 b*_l0) + 2 * sum_{m=1..l} Re(a_lm b*_lm)] / (2l + 1)
"""

from __future__ import annotations

import logging

import numpy as np

from .alm import Alm
from .errors import IncompatibleAlmError

__all__ = ["alm2cl"]

logger = logging.getLogger(__name__)


def _check_compatible(alm1: Alm, alm2: Alm) -> None:
    if alm1.lmax != alm2.lmax:
        raise IncompatibleAlmError(
            f"Alm lmax do not match ({alm1.lmax} != {alm2.lmax})", reason="lmax"
        )
    if alm1.mmax != alm2.mmax:
        raise IncompatibleAlmError(
            f"Alm mmax do not match ({alm1.mmax} != {alm2.mmax})", reason="mmax"
        )
    # Compares one set's mmax with the other's lmax; with equal bounds this
    # only admits full triangles.
    if alm1.mmax < alm2.lmax:
        raise IncompatibleAlmError(
            f"Alm mmax < lmax ({alm1.mmax} < {alm2.lmax})", reason="truncated"
        )


def alm2cl(alm1: Alm, alm2: Alm | None = None) -> np.ndarray:
    """
    Compute C_l from the coefficients of one or two fields.

    Args:
        alm1: Coefficients of the first field.
        alm2: Coefficients of the second field; ``None`` gives the auto-spectrum.

    Returns:
        Real array of length ``lmax + 1``; element ``i`` refers to ``l = i``.

    Raises:
        IncompatibleAlmError: If the two sets differ in ``lmax`` or ``mmax``,
            or are truncated (``mmax < lmax``).
    """
    if alm2 is None:
        alm2 = alm1
    _check_compatible(alm1, alm2)

    lmax = alm1.lmax
    l, m = alm1.lm  # noqa: E741
    products = np.real(alm1.values * np.conj(alm2.values))
    weights = np.where(m == 0, 1.0, 2.0)

    cl = np.bincount(l, weights=weights * products, minlength=lmax + 1)
    cl /= 2.0 * np.arange(lmax + 1) + 1.0
    logger.debug("Computed C_l up to lmax=%d", lmax)
    return cl.astype(np.promote_types(products.dtype, np.float32), copy=False)
