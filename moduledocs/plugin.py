"""
plugin.py

Responsibility: Activation glue for the settings WBS report.

`load_project` locates and reads the manifest once. On `apply` it is folded and rendered
immediately; only the file write is deferred, registered as a task for the caller to run
in a later phase.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from moduledocs.config import DEFAULT_TASK_NAME, Config
from moduledocs.manifest import extract_module_groups, find_root_project_name, locate_manifest, read_manifest_lines
from moduledocs.renderer import DiagramDocument, render_diagram
from moduledocs.tasks import DeferredTask, TaskRegistry

logger = logging.getLogger(__name__)

REPORT_DIR_NAME = "reports-uml"
REPORT_FILE_NAME = "settings.puml"


@dataclass(frozen=True)
class Project:
    """The project being documented, with its settings manifest read once up front."""

    root_dir: Path
    name: str
    build_dir: Path
    manifest: Path | None = None
    manifest_lines: tuple[str, ...] = ()

    @property
    def report_dir(self) -> Path:
        return self.build_dir / REPORT_DIR_NAME

    @property
    def report_file(self) -> Path:
        return self.report_dir / REPORT_FILE_NAME


def resolve_project_name(root_dir: Path, manifest_lines: Iterable[str], override: str | None = None) -> str:
    """
    Display name: explicit override, else `rootProject.name` from the manifest,
    else the root directory name.
    """
    if override:
        return override
    name = find_root_project_name(manifest_lines)
    return name or root_dir.name


def load_project(root_dir: str | Path, config: Config | None = None) -> Project:
    cfg = config or Config()
    root = Path(root_dir).resolve()
    build_dir = root / cfg.build_dir if cfg.build_dir else root / "build"
    manifest = locate_manifest(root)
    if manifest is None:
        logger.debug("No settings manifest found; rendering an empty module diagram")
    lines = tuple(read_manifest_lines(manifest))
    return Project(
        root_dir=root,
        name=resolve_project_name(root, lines, cfg.project_name),
        build_dir=build_dir.resolve(),
        manifest=manifest,
        manifest_lines=lines,
    )


def build_document(project: Project) -> DiagramDocument:
    groups = extract_module_groups(project.manifest_lines)
    logger.debug("Extracted %d module group(s) from %s", len(groups), project.manifest)
    return render_diagram(project.name, groups)


def apply(project: Project, tasks: TaskRegistry, *, task_name: str | None = None) -> None:
    """
    Render the settings diagram and register the deferred write under task_name.
    """
    logger.info("Project root dir: %s", project.root_dir)
    document = build_document(project)
    tasks.register(
        DeferredTask(
            name=task_name or DEFAULT_TASK_NAME,
            document=document,
            report_dir=project.report_dir,
            report_file=project.report_file,
        )
    )
    logger.info("Task Wbs settings.gradle included")
