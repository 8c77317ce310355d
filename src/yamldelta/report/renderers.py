"""Text rendering of diff trees.

Every emitted line is ``<indent><marker> <content>``. Indentation is four
spaces per nesting level and markers are ``+`` (added), ``-`` (removed)
and ``~`` (changed). Collapsed runs of unchanged list items carry no
marker.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TextIO

from yamldelta.constants import (
    CHANGE_ARROW,
    INDENT,
    MARKER_ADDED,
    MARKER_CHANGED,
    MARKER_REMOVED,
)
from yamldelta.core.diff.models import (
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
    UnchangedRun,
)
from yamldelta.core.document import Node, Scalar, dump_lines, inline_text, is_inline
from yamldelta.core.errors import OutputError

Decorator = Callable[[str, str], str]
RenderedLine = tuple[str, str]


def _line(depth: int, marker: str, content: str) -> str:
    prefix = INDENT * depth
    if not marker:
        return f"{prefix}{content}"
    return f"{prefix}{marker} {content}"


def _changed(old: Scalar, new: Scalar) -> str:
    return f"{old.text}{CHANGE_ARROW}{new.text}"


def _keyed_subtree(depth: int, marker: str, key: Scalar, node: Node) -> Iterator[RenderedLine]:
    if is_inline(node):
        yield marker, _line(depth, marker, f"{key.text}: {inline_text(node)}")
        return
    yield marker, _line(depth, marker, f"{key.text}:")
    for content in dump_lines(node):
        yield marker, _line(depth, marker, f"{INDENT}{content}")


def _bare_subtree(depth: int, marker: str, node: Node) -> Iterator[RenderedLine]:
    for content in dump_lines(node):
        yield marker, _line(depth, marker, content)


def _list_item(depth: int, marker: str, node: Node) -> Iterator[RenderedLine]:
    first, *rest = dump_lines(node)
    yield marker, _line(depth, marker, f"- {first}")
    for content in rest:
        yield marker, _line(depth, marker, f"  {content}")


def _map_entries(depth: int, node: MapDiff) -> Iterator[RenderedLine]:
    for key, child in node.entries:
        yield from _map_entry(depth, key, child)


def _map_entry(depth: int, key: Scalar, node: DiffNode) -> Iterator[RenderedLine]:
    if isinstance(node, Added):
        yield from _keyed_subtree(depth, MARKER_ADDED, key, node.node)
    elif isinstance(node, Removed):
        yield from _keyed_subtree(depth, MARKER_REMOVED, key, node.node)
    elif isinstance(node, Replaced):
        yield from _keyed_subtree(depth, MARKER_REMOVED, key, node.old)
        yield from _keyed_subtree(depth, MARKER_ADDED, key, node.new)
    elif isinstance(node, Changed):
        yield MARKER_CHANGED, _line(depth, MARKER_CHANGED, f"{key.text}: {_changed(node.old, node.new)}")
    elif isinstance(node, MapDiff) and not node.is_empty():
        yield MARKER_CHANGED, _line(depth, MARKER_CHANGED, f"{key.text}:")
        yield from _map_entries(depth + 1, node)
    elif isinstance(node, ListDiff) and not node.is_empty():
        yield MARKER_CHANGED, _line(depth, MARKER_CHANGED, f"{key.text}:")
        yield from _list_ops(depth + 1, node)


def _list_ops(depth: int, node: ListDiff) -> Iterator[RenderedLine]:
    for op in node.ops:
        if isinstance(op, UnchangedRun):
            noun = "item" if op.count == 1 else "items"
            yield "", _line(depth, "", f"({op.count} unchanged {noun})")
        elif isinstance(op, Inserted):
            yield from _list_item(depth, MARKER_ADDED, op.node)
        elif isinstance(op, RemovedItem):
            yield from _list_item(depth, MARKER_REMOVED, op.node)
        elif isinstance(op, ChangedItem):
            yield MARKER_CHANGED, _line(depth, MARKER_CHANGED, f"- {_changed(op.old, op.new)}")


def iter_lines(root: DiffNode) -> Iterator[RenderedLine]:
    """Yield ``(marker, line)`` pairs for a diff tree, depth first."""
    if isinstance(root, MapDiff):
        yield from _map_entries(0, root)
    elif isinstance(root, ListDiff):
        if not root.is_empty():
            yield from _list_ops(0, root)
    elif isinstance(root, Changed):
        yield MARKER_CHANGED, _line(0, MARKER_CHANGED, _changed(root.old, root.new))
    elif isinstance(root, Added):
        yield from _bare_subtree(0, MARKER_ADDED, root.node)
    elif isinstance(root, Removed):
        yield from _bare_subtree(0, MARKER_REMOVED, root.node)
    elif isinstance(root, Replaced):
        yield from _bare_subtree(0, MARKER_REMOVED, root.old)
        yield from _bare_subtree(0, MARKER_ADDED, root.new)


def render(root: DiffNode, decorate: Decorator | None = None) -> str:
    """Render a diff tree to text; an unchanged tree renders as ``""``."""
    rendered: list[str] = []
    for marker, line in iter_lines(root):
        rendered.append(decorate(marker, line) if decorate else line)
        rendered.append("\n")
    return "".join(rendered)


def write(root: DiffNode, sink: TextIO, decorate: Decorator | None = None) -> int:
    """Append the rendered diff to ``sink`` one line at a time.

    The sink is owned by the caller and is neither flushed nor closed.
    Returns the number of lines written.
    """
    count = 0
    for marker, line in iter_lines(root):
        text = decorate(marker, line) if decorate else line
        try:
            sink.write(f"{text}\n")
        except (OSError, ValueError) as exc:
            raise OutputError(f"Unable to write diff output: {exc}") from exc
        count += 1
    return count
