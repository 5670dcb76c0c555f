"""Process-wide logging setup; modules log through logging.getLogger(__name__)."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once. Safe to call again (handlers are replaced)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
        force=True,
    )
    # SQL echo is controlled by the engine (DEBUG), keep the sqlalchemy logger quiet otherwise.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
