"""
writer.py

Responsibility: Persist a rendered report to disk.

The destination directory is created on demand and the report file is always
overwritten. Failures are not retried; they surface as ReportWriteError.
"""

from __future__ import annotations

import logging
from pathlib import Path

from moduledocs.errors import ModuleDocsError

logger = logging.getLogger(__name__)


class ReportWriteError(ModuleDocsError):
    pass


def write_report(*, report_dir: str | Path, report_file: str | Path, payload: str) -> Path:
    """
    Ensure report_dir exists, then write payload to report_file (UTF-8, `\\n` newlines).
    """
    dst_dir = Path(report_dir)
    dst_file = Path(report_file)
    try:
        dst_dir.mkdir(parents=True, exist_ok=True)
        dst_file.write_text(payload, encoding="utf-8", newline="\n")
    except OSError as e:
        raise ReportWriteError(f"Failed writing report: {dst_file}") from e
    logger.debug("Wrote %d bytes to %s", len(payload.encode("utf-8")), dst_file)
    return dst_file
