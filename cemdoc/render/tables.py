"""Titled table sections built from column specs and declaration records."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from ..config import PRIVACY_DETAILS, PRIVACY_HIDDEN, RenderOptions
from ..fp import Predicate, identity, is_lengthy, is_private, is_private_or_protected, negate, repeat
from ..logging import get_logger
from ..mdast import Block, heading, table, table_row, text
from .descriptors import ColumnSpec, project_column, resolve_descriptor

DEFAULT_TABLE_LEVEL = 3


def privacy_filter(options: RenderOptions) -> Predicate:
    """Row predicate for the configured privacy mode."""
    if options.private == PRIVACY_HIDDEN:
        return negate(is_private)
    if options.private == PRIVACY_DETAILS:
        return negate(is_private_or_protected)
    return identity


def keep_all(_: Any) -> bool:
    return True


class TableBuilder:
    """Builds heading + table node pairs, omitting tables with no rows."""

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()
        self.logger = get_logger("render.tables")

    def build(
        self,
        title: str,
        column_specs: Sequence[ColumnSpec],
        rows: Optional[Iterable[Any]],
        *,
        heading_level: int = DEFAULT_TABLE_LEVEL,
        row_filter: Optional[Predicate] = None,
    ) -> List[Block]:
        """Return ``[heading, table]`` for the surviving rows, or ``[]``.

        ``row_filter`` replaces the privacy filter when given. Absent entries
        (for example a missing superclass) are dropped before filtering.
        """
        selected = self.select_rows(rows, row_filter)
        if not is_lengthy(selected):
            self.logger.debug("Skipping empty %s table", title)
            return []

        columns = [project_column(selected, resolve_descriptor(spec)) for spec in column_specs]
        header = table_row([column.heading_cell() for column in columns])
        body = [
            table_row([column.cell(index) for column in columns])
            for index in range(len(selected))
        ]

        return [
            heading(heading_level + self.options.heading_offset, text(title)),
            table(repeat(len(columns), None), [header, *body]),
        ]

    def select_rows(
        self, rows: Optional[Iterable[Any]], row_filter: Optional[Predicate] = None
    ) -> List[Any]:
        by = row_filter if callable(row_filter) else privacy_filter(self.options)
        return [row for row in _as_rows(rows) if row and by(row)]


def _as_rows(rows: Optional[Iterable[Any]]) -> List[Any]:
    if rows is None or isinstance(rows, (str, bytes)):
        return []
    if isinstance(rows, dict):
        return [rows]
    try:
        return list(rows)
    except TypeError:
        return []


__all__ = ["DEFAULT_TABLE_LEVEL", "TableBuilder", "keep_all", "privacy_filter"]
