"""Serialization of document trees into GitHub-flavoured Markdown."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from ..mdast import Block, Heading, Html, Inline, InlineCode, Root, Table, TableRow, Text

_ALIGN_DELIMITERS = {
    None: "---",
    "left": ":--",
    "right": "--:",
    "center": ":-:",
}
_BACKTICK_RUN = re.compile(r"`+")


class MarkdownSerializer:
    """Turns a :class:`~cemdoc.mdast.Root` into Markdown source text."""

    def serialize(self, tree: Root) -> str:
        blocks = [self.block(node) for node in tree.children]
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def block(self, node: Block) -> str:
        if isinstance(node, Heading):
            depth = min(max(node.depth, 1), 6)
            return f"{'#' * depth} {self.inline(node.children)}"
        if isinstance(node, Table):
            return self.table(node)
        if isinstance(node, Html):
            return node.value
        raise TypeError(f"Cannot serialize block node {node!r}")

    def table(self, node: Table) -> str:
        if not node.children:
            return ""
        header, *body = node.children
        lines = [self._row(header, len(node.align))]
        lines.append(
            "| " + " | ".join(self._delimiter(align) for align in node.align) + " |"
        )
        lines.extend(self._row(row, len(node.align)) for row in body)
        return "\n".join(lines)

    def inline(self, children: Iterable[Inline], *, in_table: bool = False) -> str:
        parts: List[str] = []
        for child in children:
            if isinstance(child, Text):
                parts.append(_escape_text(child.value, in_table=in_table))
            elif isinstance(child, InlineCode):
                parts.append(_code_span(child.value, in_table=in_table))
            elif isinstance(child, Html):
                parts.append(child.value)
            else:
                raise TypeError(f"Cannot serialize inline node {child!r}")
        return "".join(parts)

    def _row(self, row: TableRow, width: int) -> str:
        cells = [self.inline(cell.children, in_table=True) for cell in row.children]
        cells += [""] * (width - len(cells))
        return "| " + " | ".join(cells) + " |"

    @staticmethod
    def _delimiter(align: Optional[str]) -> str:
        return _ALIGN_DELIMITERS.get(align, "---")


def _single_line(value: str) -> str:
    return " ".join(value.splitlines())


def _escape_text(value: str, *, in_table: bool) -> str:
    value = _single_line(value)
    if in_table:
        value = value.replace("|", "\\|")
    return value


def _code_span(value: str, *, in_table: bool) -> str:
    value = _single_line(value)
    if in_table:
        value = value.replace("|", "\\|")
    longest = max((len(run) for run in _BACKTICK_RUN.findall(value)), default=0)
    fence = "`" * (longest + 1)
    if value.startswith("`") or value.endswith("`"):
        value = f" {value} "
    return f"{fence}{value}{fence}"


__all__ = ["MarkdownSerializer"]
