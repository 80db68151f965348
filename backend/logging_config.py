"""Logging setup shared by the backend entry points."""

from __future__ import annotations

import logging
import os
from typing import Iterable

LOG_LEVEL_ENV = "RPS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(
    *,
    level: str | None = None,
    include_uvicorn: bool = True,
    extra_loggers: Iterable[str] = (),
) -> logging.Logger:
    """Install the root handler and bring related loggers to one level.

    ``level`` wins over the ``RPS_LOG_LEVEL`` environment variable; INFO is
    used when neither is set. Returns the ``rps.backend`` logger.
    """
    resolved = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    names = list(extra_loggers)
    if include_uvicorn:
        names.extend(UVICORN_LOGGERS)
    for name in names:
        logging.getLogger(name).setLevel(resolved)

    backend_logger = logging.getLogger("rps.backend")
    backend_logger.setLevel(resolved)
    backend_logger.debug("Logging configured at %s", resolved)
    return backend_logger
