"""yamldelta core: document model, diff engine and diff tree models.

Everything here is pure: inputs are never mutated and nothing is written
anywhere. It has **no** dependency on typer, rich, or any CLI framework.
"""
from __future__ import annotations
