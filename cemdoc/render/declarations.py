"""Per-declaration documentation sections."""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from ..config import PRIVACY_DETAILS, RenderOptions
from ..fp import field_of, is_lengthy, is_private_or_protected, kind_is
from ..mdast import Block, Heading, heading, html, inline_code, text
from .descriptors import (
    ATTR_FIELD,
    DEFAULT,
    INHERITANCE,
    PARAMETERS,
    RETURN,
    TYPE,
    ColumnSpec,
)
from .tables import TableBuilder, keep_all

REFERENCE_COLUMNS: Sequence[ColumnSpec] = ("name", "module", "package")
PARAMETER_COLUMNS: Sequence[ColumnSpec] = ("name", TYPE, DEFAULT, "description")
FIELD_COLUMNS: Sequence[ColumnSpec] = ("name", "privacy", TYPE, DEFAULT, "description", INHERITANCE)
METHOD_COLUMNS: Sequence[ColumnSpec] = (
    "name",
    "privacy",
    "description",
    PARAMETERS,
    RETURN,
    INHERITANCE,
)
EVENT_COLUMNS: Sequence[ColumnSpec] = ("name", TYPE, "description", INHERITANCE)
ATTRIBUTE_COLUMNS: Sequence[ColumnSpec] = ("name", ATTR_FIELD, INHERITANCE)
CSS_PROPERTY_COLUMNS: Sequence[ColumnSpec] = ("name", DEFAULT, "description")
NAME_DESCRIPTION_COLUMNS: Sequence[ColumnSpec] = ("name", "description")

HEADED_KINDS = ("class", "mixin")
DECLARATION_LEVEL = 2

SEPARATOR = html("<hr/>")
PRIVATE_API_OPEN = html("<details><summary>Private API</summary>")
PRIVATE_API_CLOSE = html("</details>")


class DeclarationRenderer:
    """Renders one declaration into headings and tables."""

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()
        self.tables = TableBuilder(self.options)

    def heading(self, declaration: Mapping[str, Any]) -> Heading:
        """``kind: `name``` with the custom element tag appended when present."""
        kind = field_of(declaration, "kind") or ""
        name = field_of(declaration, "name") or ""
        tag_name = field_of(declaration, "tagName")
        children = [text(f"{kind}: "), inline_code(str(name))]
        if tag_name:
            children.extend([text(", "), inline_code(str(tag_name))])
        return heading(DECLARATION_LEVEL + self.options.heading_offset, children)

    def render(self, declaration: Mapping[str, Any]) -> List[Block]:
        kind = field_of(declaration, "kind")
        members = _sequence(field_of(declaration, "members"))
        fields = [member for member in members if kind_is("field")(member)]
        methods = [member for member in members if kind_is("method")(member)]
        build = self.tables.build

        nodes: List[Block] = []
        if kind in HEADED_KINDS:
            nodes.append(self.heading(declaration))
        nodes += build("Superclass", REFERENCE_COLUMNS, [field_of(declaration, "superclass")])
        nodes += build("Mixins", REFERENCE_COLUMNS, field_of(declaration, "mixins"))
        if kind == "mixin":
            nodes += build("Parameters", PARAMETER_COLUMNS, field_of(declaration, "parameters"))
        nodes += build("Fields", FIELD_COLUMNS, fields)
        nodes += build("Methods", METHOD_COLUMNS, methods)
        nodes += build("Events", EVENT_COLUMNS, field_of(declaration, "events"), row_filter=keep_all)
        nodes += build(
            "Attributes", ATTRIBUTE_COLUMNS, field_of(declaration, "attributes"), row_filter=keep_all
        )
        nodes += build(
            "CSS Properties",
            CSS_PROPERTY_COLUMNS,
            field_of(declaration, "cssProperties"),
            row_filter=keep_all,
        )
        nodes += build("Parts", NAME_DESCRIPTION_COLUMNS, field_of(declaration, "parts"), row_filter=keep_all)
        nodes += build("Slots", NAME_DESCRIPTION_COLUMNS, field_of(declaration, "slots"), row_filter=keep_all)

        nodes += self.private_api(fields, methods)

        if nodes:
            nodes.append(SEPARATOR)
        return nodes

    def private_api(self, fields: Sequence[Any], methods: Sequence[Any]) -> List[Block]:
        """Collapsible appendix listing protected and private members."""
        if self.options.private != PRIVACY_DETAILS:
            return []
        hidden_fields = [member for member in fields if is_private_or_protected(member)]
        hidden_methods = [member for member in methods if is_private_or_protected(member)]
        if not (is_lengthy(hidden_fields) or is_lengthy(hidden_methods)):
            return []
        return [
            PRIVATE_API_OPEN,
            *self.tables.build("Fields", FIELD_COLUMNS, hidden_fields, row_filter=keep_all),
            *self.tables.build("Methods", METHOD_COLUMNS, hidden_methods, row_filter=keep_all),
            PRIVATE_API_CLOSE,
        ]


def _sequence(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


__all__ = [
    "ATTRIBUTE_COLUMNS",
    "CSS_PROPERTY_COLUMNS",
    "DeclarationRenderer",
    "EVENT_COLUMNS",
    "FIELD_COLUMNS",
    "METHOD_COLUMNS",
    "NAME_DESCRIPTION_COLUMNS",
    "PARAMETER_COLUMNS",
    "PRIVATE_API_CLOSE",
    "PRIVATE_API_OPEN",
    "REFERENCE_COLUMNS",
    "SEPARATOR",
]
