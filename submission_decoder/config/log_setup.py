"""
Logging bootstrap for applications embedding the decoder.

The library itself only creates module loggers; callers opt in to a
handler configuration by calling :func:`configure_logging`.
"""
import logging
import sys
from typing import Optional

from submission_decoder.config.settings import LOG_LEVEL

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def configure_logging(level: Optional[str] = None, stream=None) -> None:
    """Install a root handler using LOG_LEVEL unless *level* is given."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        stream=stream or sys.stdout,
        force=True,
    )
