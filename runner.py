from __future__ import annotations

"""Repo-root convenience shim for launching the SysTimeline viewer.

    python runner.py [trace.json]

It delegates to the canonical UI entry point:

    python -m systimeline_ui
"""

import sys


def main() -> int:
    """Launch the viewer; arguments are forwarded as in `python -m systimeline_ui`."""

    # `systimeline_ui.__main__.main()` prints the friendly PySide6-missing message.
    from systimeline_ui.__main__ import main as ui_main

    sys.argv = ["systimeline_ui", *sys.argv[1:]]

    return ui_main()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
