from __future__ import annotations

INDENT = "    "

MARKER_ADDED = "+"
MARKER_REMOVED = "-"
MARKER_CHANGED = "~"
CHANGE_ARROW = " -> "

COLOR_ENV_VAR = "COLOR"
STDIN_PATH = "-"

EXIT_NO_CHANGES = 0
EXIT_CHANGES = 1
EXIT_INTERNAL_ERROR = 2
