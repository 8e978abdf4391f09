"""Read and write a_lm coefficient tables stored as FITS binary tables."""

from __future__ import annotations

import logging
import os

import numpy as np
from astropy.io import fits

from . import config
from .alm import Alm
from .errors import MalformedTableError
from .table import decode_alm_table, encode_alm_table

__all__ = ["read_alm_from_fits", "write_alm_to_fits"]

logger = logging.getLogger(__name__)


def _read_table_hdu(table_hdu, dtype=None) -> Alm:
    if not isinstance(table_hdu, (fits.BinTableHDU, fits.TableHDU)):
        raise TypeError(
            f"Expected a FITS table HDU, got {type(table_hdu).__name__}"
        )
    if table_hdu.data is None or len(table_hdu.columns) < 3:
        raise MalformedTableError(
            "a_lm table needs three columns (index, real, imag)"
        )

    data = table_hdu.data
    logger.debug("Reading %d rows from HDU '%s'", len(data), table_hdu.name)
    alm = decode_alm_table(
        np.asarray(data.field(0), dtype=np.int64),
        np.asarray(data.field(1), dtype=np.float64),
        np.asarray(data.field(2), dtype=np.float64),
        dtype=dtype,
    )

    header_lmax = table_hdu.header.get(config.FITS_LMAX_KEYWORD)
    if header_lmax is not None and int(header_lmax) != alm.lmax:
        logger.debug(
            "%s=%s in header but highest stored degree is %d",
            config.FITS_LMAX_KEYWORD,
            header_lmax,
            alm.lmax,
        )
    return alm


def read_alm_from_fits(source, hdu: int | str = config.FITS_ALM_HDU, dtype=None) -> Alm:
    """
    Read a set of a_lm coefficients from a FITS binary table.

    Columns are taken by position: 64-bit index, real part, imaginary part.

    Args:
        source: File path, an open :class:`astropy.io.fits.HDUList`, or a
            table HDU. Files opened from a path are closed before returning,
            also on error; objects passed in stay open and belong to the caller.
        hdu: Extension holding the table when ``source`` is a path or HDUList.
        dtype: Complex dtype of the coefficients.

    Raises:
        OSError: If the file cannot be opened or read.
        MalformedTableError: If the index column cannot be decoded.
    """
    if isinstance(source, (str, os.PathLike)):
        with fits.open(source) as hdul:
            return _read_table_hdu(hdul[hdu], dtype)
    if isinstance(source, fits.HDUList):
        return _read_table_hdu(source[hdu], dtype)
    return _read_table_hdu(source, dtype)


def write_alm_to_fits(alm: Alm, path, overwrite: bool = False) -> None:
    """Write ``alm`` as a three-column binary table in the first extension."""
    index, real, imag = encode_alm_table(alm)
    table = fits.BinTableHDU.from_columns(
        [
            fits.Column(
                name=config.FITS_INDEX_COLUMN,
                format=config.FITS_INDEX_FORMAT,
                array=index,
            ),
            fits.Column(
                name=config.FITS_REAL_COLUMN,
                format=config.FITS_VALUE_FORMAT,
                array=real,
            ),
            fits.Column(
                name=config.FITS_IMAG_COLUMN,
                format=config.FITS_VALUE_FORMAT,
                array=imag,
            ),
        ]
    )
    table.header[config.FITS_LMAX_KEYWORD] = (alm.lmax, "maximum l in the table")
    table.header[config.FITS_MMAX_KEYWORD] = (alm.mmax, "maximum m in the table")

    fits.HDUList([fits.PrimaryHDU(), table]).writeto(path, overwrite=overwrite)
    logger.debug("Wrote %d coefficients to %s", index.size, path)
