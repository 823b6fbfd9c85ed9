# app/core/logging.py
"""Central logging setup for the API process."""
from __future__ import annotations

import logging

NOISY_LIBRARY_LOGGERS = ("urllib3",)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _resolve_level(level_name: str) -> int:
    return getattr(logging, (level_name or "INFO").upper(), logging.INFO)


def configure_logging(level_name: str = "INFO") -> logging.Logger:
    logger = logging.getLogger()
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(level_name))
    for name in NOISY_LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)
    return logger
