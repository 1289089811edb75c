"""
manifest.py

Responsibility: Locate a Gradle settings manifest and fold its module-inclusion
declarations into an ordered, immutable grouping.

Recognized declaration lines look like `include(":app:feature-a")`. Anything else in the
manifest is ignored; this is deliberately not a Gradle/Kotlin parser.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from moduledocs.errors import ModuleDocsError

logger = logging.getLogger(__name__)

SETTINGS_GRADLE_KTS = "settings.gradle.kts"
SETTINGS_GRADLE = "settings.gradle"

# Checked in this order; the Kotlin DSL file wins when both exist.
MANIFEST_NAMES: tuple[str, ...] = (SETTINGS_GRADLE_KTS, SETTINGS_GRADLE)

INCLUDE_PREFIX = 'include("'
INCLUDE_SUFFIX = '")'
SEGMENT_SEPARATOR = ":"

ModuleGroups = Mapping[str, tuple[str, ...]]

_ROOT_PROJECT_NAME_RE = re.compile(r"""^\s*rootProject\.name\s*=\s*(["'])(?P<name>.*?)\1""")


class ManifestError(ModuleDocsError):
    pass


def locate_manifest(root_dir: str | Path) -> Path | None:
    """
    Return the settings manifest directly under root_dir, or None if there is none.
    """
    root = Path(root_dir)
    for name in MANIFEST_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def parse_declaration(line: str) -> tuple[str, ...] | None:
    """
    Split one manifest line into its non-blank colon segments.

    Returns None when the line is not an inclusion declaration. Segments are kept
    exactly as written; only empty or whitespace-only ones are dropped.
    """
    if not line.startswith(INCLUDE_PREFIX):
        return None
    body = line.replace(INCLUDE_PREFIX, "").replace(INCLUDE_SUFFIX, "")
    return tuple(seg for seg in body.split(SEGMENT_SEPARATOR) if seg.strip())


def extract_module_groups(lines: Iterable[str]) -> ModuleGroups:
    """
    Fold manifest lines into `{group key: subgroup entries}`.

    Keys keep first-encounter order; a key declared more than once accumulates all of
    its entries in encounter order (duplicates included).
    """
    acc: dict[str, tuple[str, ...]] = {}
    for line in lines:
        segments = parse_declaration(line)
        if not segments:
            continue
        key, rest = segments[0], segments[1:]
        acc[key] = acc.get(key, ()) + rest
    return MappingProxyType(acc)


def read_manifest_lines(manifest: Path | None) -> list[str]:
    """
    Read manifest lines; undecodable bytes are replaced rather than rejected.
    """
    if manifest is None:
        return []
    try:
        text = manifest.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ManifestError(f"Failed reading settings manifest: {manifest}") from e
    return text.splitlines()


def read_module_groups(manifest: Path | None) -> ModuleGroups:
    """
    Read and fold a manifest file. A missing manifest yields an empty grouping.
    """
    if manifest is None:
        logger.debug("No settings manifest found; rendering an empty module diagram")
    groups = extract_module_groups(read_manifest_lines(manifest))
    logger.debug("Extracted %d module group(s) from %s", len(groups), manifest)
    return groups


def find_root_project_name(lines: Iterable[str]) -> str | None:
    """
    Return the value of the first `rootProject.name = "..."` assignment, if any.
    """
    for line in lines:
        m = _ROOT_PROJECT_NAME_RE.match(line)
        if m and m.group("name").strip():
            return m.group("name")
    return None
