"""Logging configuration."""
import logging
import sys
from typing import Optional

from starbuzz.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging.

    Records go to stderr so the order transcript on stdout stays clean.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )
