"""
cli.py

Responsibility: CLI entrypoint for moduledocs.

High-level flow (`build`):
1) Load config (file + flag overrides) -> `Config`
2) Resolve the project (root, display name, build dir) -> `Project`
3) Apply the plugin: locate -> parse -> render -> register the write task
4) Run the registered tasks

`render` stops after rendering and prints the diagram instead of writing it.
"""

from __future__ import annotations

import argparse
import logging
import sys

from moduledocs.config import Config, load_config
from moduledocs.errors import ModuleDocsError
from moduledocs.logging_utils import configure_logging
from moduledocs.plugin import Project, apply, build_document, load_project
from moduledocs.tasks import TaskRegistry

logger = logging.getLogger(__name__)


def _resolve(args: argparse.Namespace) -> tuple[Config, Project]:
    config = load_config(args.project_dir, args.config).with_overrides(
        project_name=args.project_name,
        build_dir=args.build_dir,
        task_name=getattr(args, "task_name", None),
    )
    return config, load_project(args.project_dir, config)


def build_cmd(args: argparse.Namespace) -> int:
    config, project = _resolve(args)

    tasks = TaskRegistry()
    apply(project, tasks, task_name=config.task_name)

    for path in tasks.run_all():
        print(path)
    return 0


def render_cmd(args: argparse.Namespace) -> int:
    _config, project = _resolve(args)
    sys.stdout.write(build_document(project).text)
    return 0


def _add_project_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("project_dir", nargs="?", default=".", help="Gradle project root (default: .)")
    p.add_argument("--config", default=None, help="Config YAML (default: <project_dir>/moduledocs.yaml if present)")
    p.add_argument("--project-name", default=None, help="Diagram root label (overrides rootProject.name)")
    p.add_argument("--build-dir", default=None, help="Build directory (default: <project_dir>/build)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="moduledocs", description="Render a WBS diagram of a Gradle project's modules")
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser("build", help="Write <build-dir>/reports-uml/settings.puml")
    _add_project_args(b)
    b.add_argument("--task-name", default=None, help="Name of the registered write task")
    b.set_defaults(func=build_cmd)

    r = sub.add_parser("render", help="Print the diagram to stdout without writing it")
    _add_project_args(r)
    r.set_defaults(func=render_cmd)
    return p


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=_log_level(args))
    try:
        return int(args.func(args))
    except ModuleDocsError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
