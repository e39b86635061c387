"""Logging setup."""
import logging
from typing import Optional

from receipt_points.config import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger."""
    level_name = (level or config.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    # uvicorn access logs are noisy at DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
