from __future__ import annotations


class ModuleDocsError(RuntimeError):
    """Base class for every error raised by moduledocs."""
