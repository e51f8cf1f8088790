"""Namespaced loggers for Tinta.

Every module logs through ``get_logger(__name__)`` so records land under
``tinta.*``. Tinta only emits DEBUG records: a one-line summary per
render (line count, resolved FormatConfig), theme registry lookups, and
themes loaded from serialized data. Handlers are left to the application.

Example:
    >>> import logging
    >>> logging.getLogger("tinta").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``tinta`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("stylesheet").name
        'tinta.stylesheet'
    """
    if name == "tinta" or name.startswith("tinta."):
        return logging.getLogger(name)
    return logging.getLogger(f"tinta.{name}")
