"""Document tree nodes produced by the renderer.

The node set mirrors the subset of mdast the renderer needs: headings,
tables, inline text, inline code and raw html. Nodes are immutable so two
renders of the same manifest compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class InlineCode:
    value: str


@dataclass(frozen=True)
class Html:
    """Raw markup emitted verbatim by the serializer."""

    value: str


Inline = Union[Text, InlineCode, Html]


@dataclass(frozen=True)
class Heading:
    depth: int
    children: Tuple[Inline, ...]


@dataclass(frozen=True)
class TableCell:
    children: Tuple[Inline, ...]


@dataclass(frozen=True)
class TableRow:
    children: Tuple[TableCell, ...]


@dataclass(frozen=True)
class Table:
    """A table; the first row holds the column headings."""

    align: Tuple[Optional[str], ...]
    children: Tuple[TableRow, ...]


Block = Union[Heading, Table, Html]
Node = Union[Block, Inline, TableRow, TableCell]


@dataclass(frozen=True)
class Root:
    children: Tuple[Block, ...]


_NODE_TYPES = (Text, InlineCode, Html, Heading, TableCell, TableRow, Table)


def _as_tuple(children) -> tuple:
    if isinstance(children, _NODE_TYPES):
        return (children,)
    return tuple(children)


def text(value: str) -> Text:
    return Text(value=value)


def inline_code(value: str) -> InlineCode:
    return InlineCode(value=value)


def html(value: str) -> Html:
    return Html(value=value)


def heading(depth: int, children: Union[Inline, Iterable[Inline]]) -> Heading:
    return Heading(depth=depth, children=_as_tuple(children))


def table_cell(children: Union[Inline, Iterable[Inline]]) -> TableCell:
    return TableCell(children=_as_tuple(children))


def table_row(cells: Iterable[TableCell]) -> TableRow:
    return TableRow(children=_as_tuple(cells))


def table(align: Iterable[Optional[str]], rows: Iterable[TableRow]) -> Table:
    return Table(align=_as_tuple(align), children=_as_tuple(rows))


def root(children: Iterable[Block]) -> Root:
    return Root(children=_as_tuple(children))


__all__ = [
    "Block",
    "Heading",
    "Html",
    "Inline",
    "InlineCode",
    "Node",
    "Root",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "heading",
    "html",
    "inline_code",
    "root",
    "table",
    "table_cell",
    "table_row",
    "text",
]
