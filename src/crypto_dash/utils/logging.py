"""Minimal logger helper to avoid duplicating setup."""

from __future__ import annotations

import logging


def get_logger(name: str, level: str | int | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level or logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    if level is not None:
        logger.setLevel(level)
    return logger
