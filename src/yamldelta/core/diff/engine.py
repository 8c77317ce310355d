from __future__ import annotations

from collections import Counter

from yamldelta.core.diff.lcs import lcs_pairs
from yamldelta.core.diff.models import (
    UNCHANGED,
    Added,
    Changed,
    ChangedItem,
    DiffNode,
    Inserted,
    ListDiff,
    ListOp,
    MapDiff,
    Removed,
    RemovedItem,
    Replaced,
    UnchangedRun,
)
from yamldelta.core.document import List, Mapping, Node, Scalar


def _diff_mapping(old: Mapping, curr: Mapping) -> MapDiff:
    old_values = dict(old.entries)
    curr_values = dict(curr.entries)

    keys: list[Scalar] = old.keys()
    keys.extend(key for key in curr.keys() if key not in old_values)

    entries: list[tuple[Scalar, DiffNode]] = []
    for key in keys:
        if key not in curr_values:
            entries.append((key, Removed(old_values[key])))
            continue
        if key not in old_values:
            entries.append((key, Added(curr_values[key])))
            continue
        result = diff(old_values[key], curr_values[key])
        if result is not UNCHANGED:
            entries.append((key, result))
    return MapDiff(tuple(entries))


def _gap_ops(removed: tuple[Node, ...], inserted: tuple[Node, ...]) -> list[ListOp]:
    if len(removed) == 1 and len(inserted) == 1:
        old_item, new_item = removed[0], inserted[0]
        if isinstance(old_item, Scalar) and isinstance(new_item, Scalar):
            return [ChangedItem(old_item, new_item)]
    ops: list[ListOp] = [RemovedItem(item) for item in removed]
    ops.extend(Inserted(item) for item in inserted)
    return ops


def _diff_list(old: List, curr: List) -> ListDiff:
    old_items = old.items
    curr_items = curr.items
    pairs = lcs_pairs(old_items, curr_items)

    ops: list[ListOp] = []
    run = 0
    prev_i = 0
    prev_j = 0
    # The trailing sentinel flushes whatever follows the last match.
    for i, j in [*pairs, (len(old_items), len(curr_items))]:
        removed = old_items[prev_i:i]
        inserted = curr_items[prev_j:j]
        if removed or inserted:
            if run:
                ops.append(UnchangedRun(run))
                run = 0
            ops.extend(_gap_ops(removed, inserted))
        if i < len(old_items):
            run += 1
        prev_i = i + 1
        prev_j = j + 1
    if run:
        ops.append(UnchangedRun(run))
    return ListDiff(tuple(ops))


def diff(old: Node, curr: Node) -> DiffNode:
    """Compute the diff tree between an old and a current document tree."""
    if isinstance(old, Scalar) and isinstance(curr, Scalar):
        return UNCHANGED if old == curr else Changed(old, curr)

    if isinstance(old, Mapping) and isinstance(curr, Mapping):
        mapping_result = _diff_mapping(old, curr)
        return UNCHANGED if mapping_result.is_empty() else mapping_result

    if isinstance(old, List) and isinstance(curr, List):
        list_result = _diff_list(old, curr)
        return UNCHANGED if list_result.is_empty() else list_result

    return Replaced(old, curr)


def has_changes(old: Node, curr: Node) -> bool:
    return diff(old, curr) is not UNCHANGED


def _count(node: DiffNode, counts: Counter[str]) -> None:
    if isinstance(node, Added):
        counts["added"] += 1
    elif isinstance(node, Removed):
        counts["removed"] += 1
    elif isinstance(node, Changed | Replaced):
        counts["changed"] += 1
    elif isinstance(node, MapDiff):
        for _, child in node.entries:
            _count(child, counts)
    elif isinstance(node, ListDiff):
        for op in node.ops:
            if isinstance(op, Inserted):
                counts["added"] += 1
            elif isinstance(op, RemovedItem):
                counts["removed"] += 1
            elif isinstance(op, ChangedItem):
                counts["changed"] += 1


def summarize(root: DiffNode) -> dict[str, int]:
    """Count added, removed and changed values in a diff tree."""
    counts: Counter[str] = Counter()
    _count(root, counts)
    return {
        "added": counts["added"],
        "removed": counts["removed"],
        "changed": counts["changed"],
    }
