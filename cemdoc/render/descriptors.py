"""Column descriptors and their projection over declaration records."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Sequence, Tuple, Union

from ..fp import capital, field_of
from ..logging import get_logger
from ..mdast import Inline, TableCell, inline_code, table_cell, text

CellType = Callable[[str], Inline]
Accessor = Callable[[Any], Any]

logger = get_logger("render.descriptors")


@dataclass(frozen=True)
class Descriptor:
    """Heading label, value accessor and cell formatter for one table column."""

    heading: str
    get: Accessor
    cell_type: CellType = text


ColumnSpec = Union[str, Descriptor, Mapping[str, Any]]


@dataclass(frozen=True)
class Column:
    """A descriptor evaluated over a row set; ``values`` aligns with the rows."""

    heading: str
    cell_type: CellType
    values: Tuple[Any, ...]

    def heading_cell(self) -> TableCell:
        return table_cell(text(self.heading))

    def cell(self, index: int) -> TableCell:
        value = self.values[index]
        if _is_missing(value):
            return table_cell(text(""))
        return table_cell(self.cell_type(stringify(value)))


def field_descriptor(name: str) -> Descriptor:
    """Descriptor for a top-level record key, headed by the capitalised key."""

    def _get(record: Any) -> Any:
        return field_of(record, name)

    return Descriptor(heading=capital(name), get=_get)


def _missing_accessor(_: Any) -> None:
    return None


def resolve_descriptor(spec: ColumnSpec) -> Descriptor:
    """Normalise a column spec into a :class:`Descriptor`.

    Strings name a record key. Mappings with ``heading``/``get``/``cell_type``
    keys are accepted as loose descriptors; a missing accessor renders every
    cell empty.
    """
    if isinstance(spec, str):
        return field_descriptor(spec)
    if isinstance(spec, Descriptor):
        if spec.cell_type and spec.get:
            return spec
        return replace(
            spec, get=spec.get or _missing_accessor, cell_type=spec.cell_type or text
        )
    if isinstance(spec, Mapping):
        return Descriptor(
            heading=str(spec.get("heading") or ""),
            get=spec.get("get") or _missing_accessor,
            cell_type=spec.get("cell_type") or spec.get("cellType") or text,
        )
    logger.debug("Unsupported column spec %r renders as an empty column", spec)
    return Descriptor(heading=str(spec), get=_missing_accessor)


def project_column(rows: Sequence[Any], descriptor: Descriptor) -> Column:
    """Evaluate ``descriptor`` against every row, preserving row order."""
    return Column(
        heading=descriptor.heading,
        cell_type=descriptor.cell_type,
        values=tuple(_safe_get(descriptor, row) for row in rows),
    )


def _safe_get(descriptor: Descriptor, row: Any) -> Any:
    try:
        return descriptor.get(row)
    except Exception as exc:  # accessor failures render as empty cells
        logger.debug("Column %r could not read row: %s", descriptor.heading, exc)
        return None


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def stringify(value: Any) -> str:
    """Render an arbitrary cell value as text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, default=str)
    return str(value)


def format_parameters(record: Any) -> str | None:
    """``name: type`` pairs for a function or method, joined by commas."""
    parameters = field_of(record, "parameters")
    if not isinstance(parameters, list):
        return None
    rendered = []
    for parameter in parameters:
        name = field_of(parameter, "name")
        type_text = field_of(parameter, "type", "text")
        rendered.append(f"{name}: {type_text}" if type_text else f"{name}")
    return ", ".join(rendered)


def _return_type(record: Any) -> Any:
    type_text = field_of(record, "return", "type", "text")
    if type_text:
        return type_text
    value = field_of(record, "return")
    return value if isinstance(value, str) else None


DECLARATION = Descriptor("Declaration", lambda x: field_of(x, "declaration", "name") or "")
DEFAULT = Descriptor("Default", lambda x: field_of(x, "default"), inline_code)
ATTR_FIELD = Descriptor("Field", lambda x: field_of(x, "fieldName"))
INHERITANCE = Descriptor("Inherited From", lambda x: field_of(x, "inheritedFrom", "name") or "")
MODULE = Descriptor("Module", lambda x: field_of(x, "declaration", "module") or "")
PACKAGE = Descriptor("Package", lambda x: field_of(x, "declaration", "package") or "")
PARAMETERS = Descriptor("Parameters", format_parameters, inline_code)
RETURN = Descriptor("Return", _return_type, inline_code)
TYPE = Descriptor("Type", lambda x: field_of(x, "type", "text") or "", inline_code)


__all__ = [
    "ATTR_FIELD",
    "Column",
    "ColumnSpec",
    "DECLARATION",
    "DEFAULT",
    "Descriptor",
    "INHERITANCE",
    "MODULE",
    "PACKAGE",
    "PARAMETERS",
    "RETURN",
    "TYPE",
    "field_descriptor",
    "format_parameters",
    "project_column",
    "resolve_descriptor",
    "stringify",
]
