"""Read and write a_lm coefficient tables as whitespace-separated text."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from . import config
from .alm import Alm
from .table import decode_alm_table, encode_alm_table

__all__ = ["read_alm_from_text", "write_alm_to_text"]

logger = logging.getLogger(__name__)


def read_alm_from_text(source, dtype=None) -> Alm:
    """
    Read coefficients from a three-column ``index real imag`` text table.

    ``source`` may be a path or an open text buffer; pandas closes files it
    opens itself and leaves buffers to the caller. Lines starting with ``#``
    are ignored.
    """
    data = pd.read_csv(
        source,
        sep=r"\s+",
        engine="c",
        header=None,
        names=config.TEXT_COLUMNS,
        comment="#",
        float_precision="round_trip",
        dtype={
            config.TEXT_COLUMNS[0]: np.int64,
            config.TEXT_COLUMNS[1]: np.float64,
            config.TEXT_COLUMNS[2]: np.float64,
        },
    )
    logger.debug("Read %d rows from %s", len(data), source)
    index_col, real_col, imag_col = config.TEXT_COLUMNS
    return decode_alm_table(
        data[index_col].to_numpy(),
        data[real_col].to_numpy(),
        data[imag_col].to_numpy(),
        dtype=dtype,
    )


def write_alm_to_text(alm: Alm, path) -> None:
    """Write ``alm`` as ``index real imag`` rows in storage order."""
    index, real, imag = encode_alm_table(alm)
    index_col, real_col, imag_col = config.TEXT_COLUMNS
    frame = pd.DataFrame({index_col: index, real_col: real, imag_col: imag})
    frame.to_csv(
        path,
        sep=config.TEXT_SEPARATOR,
        header=False,
        index=False,
        float_format=config.TEXT_FLOAT_FORMAT,
    )
    logger.debug("Wrote %d coefficients to %s", len(frame), path)
