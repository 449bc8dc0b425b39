"""Root logger configuration for the CLI.

Call :func:`setup_logging` once at startup. Library modules only ever do
``logging.getLogger(__name__)`` and never configure handlers themselves.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """Apply a unified log format to console (and optionally file) output.

    Parameters
    ----------
    level : int | str
        Minimum severity (e.g. ``logging.DEBUG`` or ``"DEBUG"``).
    log_file : str | None
        Path of a rotating log file (1 MB, 2 backups). Console only if None.
    """
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)

    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=2)
        fh.setFormatter(fmt)
        root.addHandler(fh)
