from __future__ import annotations

from yamldelta.report.renderers import Decorator, iter_lines, render, write

__all__ = ["Decorator", "iter_lines", "render", "write"]
