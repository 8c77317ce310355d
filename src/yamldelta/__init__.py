"""yamldelta: structural diffs between two versions of a YAML document."""
from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
