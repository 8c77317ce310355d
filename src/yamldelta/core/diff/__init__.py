from __future__ import annotations

from yamldelta.core.diff.engine import diff, has_changes, summarize
from yamldelta.core.diff.models import (
    UNCHANGED,
    Added,
    Changed,
    ChangedItem,
    DiffNode,
    Inserted,
    ListDiff,
    MapDiff,
    Removed,
    RemovedItem,
    Replaced,
    Unchanged,
    UnchangedRun,
)

__all__ = [
    "UNCHANGED",
    "Added",
    "Changed",
    "ChangedItem",
    "DiffNode",
    "Inserted",
    "ListDiff",
    "MapDiff",
    "Removed",
    "RemovedItem",
    "Replaced",
    "Unchanged",
    "UnchangedRun",
    "diff",
    "has_changes",
    "summarize",
]
