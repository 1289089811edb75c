"""
tasks.py

Responsibility: A minimal deferred-task registry.

A build host registers work during plugin activation and executes it in a later phase.
`TaskRegistry` keeps that shape for standalone use: `plugin.apply` registers, the CLI runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from moduledocs.errors import ModuleDocsError
from moduledocs.renderer import DiagramDocument
from moduledocs.writer import write_report

logger = logging.getLogger(__name__)


class TaskRegistrationError(ModuleDocsError):
    pass


@dataclass(frozen=True)
class DeferredTask:
    """Write a rendered document to its report file when executed."""

    name: str
    document: DiagramDocument
    report_dir: Path
    report_file: Path

    def execute(self) -> Path:
        logger.debug("Running task %s -> %s", self.name, self.report_file)
        return write_report(
            report_dir=self.report_dir,
            report_file=self.report_file,
            payload=self.document.text,
        )


class TaskRegistry:
    def __init__(self) -> None:
        self._tasks: dict[str, DeferredTask] = {}

    def register(self, task: DeferredTask) -> None:
        if task.name in self._tasks:
            raise TaskRegistrationError(f"Task already registered: {task.name}")
        self._tasks[task.name] = task

    def get(self, name: str) -> DeferredTask:
        try:
            return self._tasks[name]
        except KeyError:
            raise TaskRegistrationError(f"Unknown task: {name}") from None

    def names(self) -> list[str]:
        return list(self._tasks)

    def run(self, name: str) -> Path:
        return self.get(name).execute()

    def run_all(self) -> list[Path]:
        return [task.execute() for task in self._tasks.values()]
