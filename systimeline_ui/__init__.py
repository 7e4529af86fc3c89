"""PySide6 desktop viewer for SysTimeline traces.

This package is intentionally a *client* of the headless core:

- Core stays UI-agnostic (no Qt imports under `systimeline/`).
- The viewer only paints the series the core assembles.

Run from source:

    python -m systimeline_ui [trace.json]
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
