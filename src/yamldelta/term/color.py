"""Terminal styling for rendered diffs, controlled by the ``COLOR`` env var."""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TextIO

import typer

from yamldelta.constants import COLOR_ENV_VAR, MARKER_ADDED, MARKER_CHANGED, MARKER_REMOVED

_MARKER_STYLES: dict[str, dict[str, Any]] = {
    MARKER_ADDED: {"fg": typer.colors.GREEN},
    MARKER_REMOVED: {"fg": typer.colors.BRIGHT_RED},
    MARKER_CHANGED: {"fg": typer.colors.YELLOW},
    "": {"dim": True},
}


def color_enabled(stream: TextIO | None = None, environ: Mapping[str, str] | None = None) -> bool:
    """Decide whether output should be styled.

    ``COLOR=true`` and ``COLOR=false`` force the decision either way. When
    the variable is unset (or holds anything else) styling follows whether
    ``stream`` is attached to a terminal.
    """
    env = os.environ if environ is None else environ
    value = env.get(COLOR_ENV_VAR)
    if value is not None:
        lowered = value.lower()
        if lowered == "false":
            return False
        if lowered == "true":
            return True
    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@dataclass(slots=True, frozen=True)
class Palette:
    enabled: bool = False

    def decorate(self, marker: str, line: str) -> str:
        if not self.enabled:
            return line
        return typer.style(line, **_MARKER_STYLES.get(marker, {}))

    def highlight_resource(self, text: str) -> str:
        if not self.enabled:
            return text
        return typer.style(text, fg=typer.colors.BRIGHT_CYAN)

    def highlight_code(self, text: str) -> str:
        quoted = f"`{text}`"
        if not self.enabled:
            return quoted
        return typer.style(quoted, fg=typer.colors.BRIGHT_CYAN)


__all__ = ["Palette", "color_enabled"]
