"""Shared logging configuration helpers."""

from __future__ import annotations

import logging

from . import config

__all__ = ["setup_logging"]


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger for command-line use.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )
