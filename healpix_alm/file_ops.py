"""Format dispatch for a_lm files."""

from __future__ import annotations

from pathlib import Path

from . import config
from .alm import Alm
from .fits_io import read_alm_from_fits, write_alm_to_fits
from .text_io import read_alm_from_text, write_alm_to_text

__all__ = ["is_fits_path", "read_alm", "write_alm"]


def is_fits_path(path) -> bool:
    """True when the file name ends in one of ``config.FITS_SUFFIXES``."""
    return str(path).lower().endswith(config.FITS_SUFFIXES)


def read_alm(path, dtype=None) -> Alm:
    """
    Read coefficients from ``path``.

    FITS files go through astropy; any other suffix is read as a
    whitespace-separated text table.
    """
    if is_fits_path(path):
        return read_alm_from_fits(path, dtype=dtype)
    return read_alm_from_text(path, dtype=dtype)


def write_alm(alm: Alm, path, overwrite: bool = False) -> None:
    """
    Write coefficients to ``path``, choosing the format from its suffix.

    Raises:
        FileExistsError: If ``path`` exists and ``overwrite`` is False.
    """
    path = Path(path)
    if path.exists() and not overwrite:
        raise FileExistsError(f"{path} already exists (pass overwrite=True)")
    if is_fits_path(path):
        write_alm_to_fits(alm, path, overwrite=overwrite)
    else:
        write_alm_to_text(alm, path)
