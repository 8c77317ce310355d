"""In-memory document model: a tree of Scalar, Mapping and List nodes.

Trees are built from YAML text with PyYAML's composer so that scalars keep
their source quoting style, which the renderer reproduces verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from yamldelta.core.errors import ParseError

_TAG_NULL = "tag:yaml.org,2002:null"
_TAG_STR = "tag:yaml.org,2002:str"
_QUOTED_STYLES = {"'", '"'}


def _emit_scalar(value: str, style: str) -> str:
    dumped = yaml.safe_dump(value, default_style=style, width=float("inf"), allow_unicode=True)
    return dumped.removesuffix("\n...\n").rstrip("\n")


@dataclass(slots=True, frozen=True)
class Scalar:
    value: str
    tag: str = _TAG_STR
    style: str | None = field(default=None, compare=False)

    @property
    def text(self) -> str:
        """The scalar as it would be written back into a document."""
        if self.style is None and "\n" not in self.value:
            if not self.value and self.tag == _TAG_NULL:
                return "null"
            return self.value
        # Multi-line values are flattened so every value fits on a single line.
        style = self.style if self.style in _QUOTED_STYLES and "\n" not in self.value else '"'
        return _emit_scalar(self.value, style)


@dataclass(slots=True, frozen=True, eq=False)
class Mapping:
    entries: tuple[tuple[Scalar, Node], ...] = ()

    def keys(self) -> list[Scalar]:
        return [key for key, _ in self.entries]

    def get(self, key: Scalar) -> Node | None:
        for candidate, value in self.entries:
            if candidate == key:
                return value
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self.entries) != len(other.entries):
            return False
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(key for key, _ in self.entries))


@dataclass(slots=True, frozen=True)
class List:
    items: tuple[Node, ...] = ()


Node = Scalar | Mapping | List


def _line(raw: yaml.Node) -> int | None:
    mark = getattr(raw, "start_mark", None)
    return mark.line + 1 if mark is not None else None


def _convert(raw: yaml.Node, source: str, active: set[int]) -> Node:
    if isinstance(raw, yaml.ScalarNode):
        return Scalar(value=raw.value, tag=raw.tag, style=raw.style or None)

    if id(raw) in active:
        raise ParseError(source, "recursive alias", _line(raw))
    active.add(id(raw))
    try:
        if isinstance(raw, yaml.SequenceNode):
            return List(tuple(_convert(item, source, active) for item in raw.value))

        entries: list[tuple[Scalar, Node]] = []
        seen: set[Scalar] = set()
        for key_node, value_node in raw.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise ParseError(source, "mapping keys must be scalars", _line(key_node))
            key = Scalar(value=key_node.value, tag=key_node.tag, style=key_node.style or None)
            if key in seen:
                raise ParseError(source, f"duplicate key {key.text!r}", _line(key_node))
            seen.add(key)
            entries.append((key, _convert(value_node, source, active)))
        return Mapping(tuple(entries))
    finally:
        active.discard(id(raw))


def load_document(text: str, source: str = "<string>") -> Node:
    """Parse a single YAML document into a node tree.

    An empty document is an empty mapping. Malformed YAML, multi-document
    streams, duplicate keys and non-scalar keys raise ``ParseError``.
    """
    try:
        raw = yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.MarkedYAMLError as exc:
        line = exc.problem_mark.line + 1 if exc.problem_mark is not None else None
        description = "; ".join(part for part in (exc.context, exc.problem) if part)
        raise ParseError(source, description or str(exc), line) from exc
    except yaml.YAMLError as exc:
        raise ParseError(source, str(exc)) from exc
    if raw is None:
        return Mapping()
    return _convert(raw, source, set())


def load_document_bytes(data: bytes, source: str = "<bytes>") -> Node:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(source, f"invalid UTF-8: {exc.reason} at byte {exc.start}") from exc
    return load_document(text, source=source)


def load_document_file(path: Path) -> Node:
    return load_document_bytes(path.read_bytes(), source=str(path))


def from_python(value: Any, source: str = "<python>") -> Node:
    """Build a node tree from plain dicts, lists and scalars."""
    try:
        text = yaml.safe_dump(value, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as exc:
        raise ParseError(source, str(exc)) from exc
    return load_document(text, source=source)


def is_inline(node: Node) -> bool:
    if isinstance(node, Scalar):
        return True
    if isinstance(node, Mapping):
        return not node.entries
    return not node.items


def inline_text(node: Node) -> str:
    if isinstance(node, Scalar):
        return node.text
    return "{}" if isinstance(node, Mapping) else "[]"


def dump_lines(node: Node) -> list[str]:
    """Block-style dump of a subtree, one string per output line."""
    if is_inline(node):
        return [inline_text(node)]

    lines: list[str] = []
    if isinstance(node, Mapping):
        for key, value in node.entries:
            if is_inline(value):
                lines.append(f"{key.text}: {inline_text(value)}")
                continue
            lines.append(f"{key.text}:")
            lines.extend(f"    {line}" for line in dump_lines(value))
        return lines

    for item in node.items:
        item_lines = dump_lines(item)
        lines.append(f"- {item_lines[0]}")
        lines.extend(f"  {line}" for line in item_lines[1:])
    return lines


__all__ = [
    "List",
    "Mapping",
    "Node",
    "Scalar",
    "dump_lines",
    "from_python",
    "inline_text",
    "is_inline",
    "load_document",
    "load_document_bytes",
    "load_document_file",
]
