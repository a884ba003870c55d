from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once for CLI use; log lines go to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
