from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(level: str, fallback: int) -> int:
    return getattr(logging, level.upper(), fallback)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=_resolve_level(level, logging.INFO),
        format=LOG_FORMAT,
    )


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(_resolve_level(level, logger.level))
    return logger
