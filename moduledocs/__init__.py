"""
moduledocs package

This package turns a Gradle settings manifest into a PlantUML work-breakdown-structure
diagram of the project's modules.

Key responsibilities are split across modules:
- `manifest.py`: locate the settings file and fold its `include(...)` lines into groups
- `renderer.py`: deterministic WBS markup rendering of the grouped modules
- `writer.py`: persist the rendered diagram under the build directory
- `tasks.py`: minimal deferred-task registry standing in for the host build's task graph
- `plugin.py`: activation glue (locate -> parse -> render -> register write task)
- `config.py`: optional YAML configuration
- `cli.py`: CLI entrypoint and logging setup
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
