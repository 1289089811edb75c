"""
renderer.py

Responsibility: Deterministically render grouped modules as PlantUML WBS markup.

Rules:
- Keys and entries are emitted in mapping/insertion order; nothing is sorted.
- One fixed visual style (blueprint theme); there are no rendering options.
- The output always ends with a newline after the closing `@endwbs` marker.

This module intentionally does NOT know about manifests, files, or tasks.
"""

from __future__ import annotations

from dataclasses import dataclass

from jinja2 import Environment, StrictUndefined

from moduledocs.errors import ModuleDocsError
from moduledocs.manifest import ModuleGroups

START_WBS_DIAGRAM = "@startwbs \n \n!theme blueprint"
END_WBS_DIAGRAM = "@endwbs"

DIAGRAM_TOPIC = "*"
DIAGRAM_SUBTOPIC = "**"

_WBS_TEMPLATE = """\
{{ start }}
{{ topic }} {{ project_name }}
{% for key, entries in groups.items() %}
{{ subtopic }} {{ key }}
{% for entry in entries %}
{{ subtopic }}{{ topic }} {{ entry }}
{% endfor %}
{% endfor %}
{{ end }}
"""


class RenderError(ModuleDocsError):
    pass


@dataclass(frozen=True)
class DiagramDocument:
    """Rendered diagram markup, one entry per output line."""

    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines) + "\n"


_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_template = _env.from_string(_WBS_TEMPLATE)


def render_diagram(project_name: str, groups: ModuleGroups) -> DiagramDocument:
    """
    Render `groups` under a single root topic named after the project.
    """
    try:
        out = _template.render(
            start=START_WBS_DIAGRAM,
            end=END_WBS_DIAGRAM,
            topic=DIAGRAM_TOPIC,
            subtopic=DIAGRAM_SUBTOPIC,
            project_name=project_name,
            groups=groups,
        )
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering module diagram for {project_name!r}") from e
    return DiagramDocument(lines=tuple(out.split("\n")[:-1]))
