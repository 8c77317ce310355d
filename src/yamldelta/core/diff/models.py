from __future__ import annotations

from dataclasses import dataclass

from yamldelta.core.document import Node, Scalar


@dataclass(slots=True, frozen=True)
class Unchanged:
    pass


UNCHANGED = Unchanged()


@dataclass(slots=True, frozen=True)
class Added:
    node: Node


@dataclass(slots=True, frozen=True)
class Removed:
    node: Node


@dataclass(slots=True, frozen=True)
class Changed:
    old: Scalar
    new: Scalar


@dataclass(slots=True, frozen=True)
class Replaced:
    """A value whose kind changed; shown as a full removal then a full addition."""

    old: Node
    new: Node


@dataclass(slots=True, frozen=True)
class UnchangedRun:
    count: int


@dataclass(slots=True, frozen=True)
class Inserted:
    node: Node


@dataclass(slots=True, frozen=True)
class RemovedItem:
    node: Node


@dataclass(slots=True, frozen=True)
class ChangedItem:
    old: Scalar
    new: Scalar


ListOp = UnchangedRun | Inserted | RemovedItem | ChangedItem


@dataclass(slots=True, frozen=True)
class MapDiff:
    entries: tuple[tuple[Scalar, DiffNode], ...] = ()

    def is_empty(self) -> bool:
        return not self.entries


@dataclass(slots=True, frozen=True)
class ListDiff:
    ops: tuple[ListOp, ...] = ()

    def is_empty(self) -> bool:
        return all(isinstance(op, UnchangedRun) for op in self.ops)


DiffNode = Unchanged | Added | Removed | Changed | Replaced | MapDiff | ListDiff


__all__ = [
    "UNCHANGED",
    "Added",
    "Changed",
    "ChangedItem",
    "DiffNode",
    "Inserted",
    "ListDiff",
    "ListOp",
    "MapDiff",
    "Removed",
    "RemovedItem",
    "Replaced",
    "Unchanged",
    "UnchangedRun",
]
