from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def configure_logging(*, level: int = logging.INFO) -> None:
    """Route warnings and errors to stderr and everything quieter to stdout."""
    to_stdout = logging.StreamHandler(stream=sys.stdout)
    to_stdout.addFilter(lambda record: record.levelno < logging.WARNING)

    to_stderr = logging.StreamHandler(stream=sys.stderr)
    to_stderr.setLevel(logging.WARNING)

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[to_stdout, to_stderr], force=True)
