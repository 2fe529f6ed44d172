"""Module- and manifest-level document assembly."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from ..config import RenderOptions
from ..fp import field_of, kind_is
from ..logging import get_logger
from ..mdast import Block, Root, heading, inline_code, root, text
from .declarations import SEPARATOR, DeclarationRenderer
from .descriptors import DECLARATION, MODULE, PACKAGE, PARAMETERS, RETURN, TYPE, ColumnSpec
from .tables import TableBuilder, keep_all

VARIABLE_COLUMNS: Sequence[ColumnSpec] = ("name", "description", TYPE)
FUNCTION_COLUMNS: Sequence[ColumnSpec] = ("name", "description", PARAMETERS, RETURN)
EXPORT_COLUMNS: Sequence[ColumnSpec] = ("kind", "name", DECLARATION, MODULE, PACKAGE)

MODULE_LEVEL = 1
MODULE_TABLE_LEVEL = 2

logger = get_logger("render.document")


class ManifestError(ValueError):
    """Raised when the input is not a manifest with a ``modules`` sequence."""


def build_module_doc(
    module: Mapping[str, Any], options: RenderOptions | None = None
) -> Optional[List[Block]]:
    """Render one module, or ``None`` when it has no declarations or exports."""
    options = options or RenderOptions()
    declarations = _records(field_of(module, "declarations"), "declaration")
    exports = _records(field_of(module, "exports"), "export")
    if not declarations and not exports:
        return None

    tables = TableBuilder(options)
    renderer = DeclarationRenderer(options)
    path = field_of(module, "path") or ""

    nodes: List[Block] = [
        heading(MODULE_LEVEL + options.heading_offset, [inline_code(str(path)), text(":")])
    ]
    for declaration in declarations:
        nodes += renderer.render(declaration)

    variables = [decl for decl in declarations if kind_is("variable")(decl)]
    functions = [decl for decl in declarations if kind_is("function")(decl)]

    variable_table = tables.build(
        "Variables", VARIABLE_COLUMNS, variables, heading_level=MODULE_TABLE_LEVEL
    )
    if variable_table:
        nodes += [*variable_table, SEPARATOR]
    function_table = tables.build(
        "Functions", FUNCTION_COLUMNS, functions, heading_level=MODULE_TABLE_LEVEL
    )
    if function_table:
        nodes += [*function_table, SEPARATOR]
    nodes += tables.build(
        "Exports", EXPORT_COLUMNS, exports, heading_level=MODULE_TABLE_LEVEL, row_filter=keep_all
    )

    logger.debug("Rendered module %s into %d nodes", path, len(nodes))
    return nodes


def build_document(manifest: Any, options: RenderOptions | None = None) -> Root:
    """Render every module of ``manifest`` into a single document tree."""
    if not isinstance(manifest, Mapping):
        raise ManifestError("Manifest must be a JSON object")
    modules = manifest.get("modules")
    if not isinstance(modules, (list, tuple)):
        raise ManifestError("Manifest must contain a 'modules' list")

    options = options or RenderOptions()
    children: List[Block] = []
    for module in _records(modules, "module"):
        module_nodes = build_module_doc(module, options)
        if module_nodes is not None:
            children += module_nodes
    return root(children)


def _records(value: Any, label: str) -> List[Mapping[str, Any]]:
    if not isinstance(value, (list, tuple)):
        return []
    records = []
    for entry in value:
        if isinstance(entry, Mapping):
            records.append(entry)
        elif entry is not None:
            logger.warning("Skipping %s entry that is not an object: %r", label, entry)
    return records


__all__ = [
    "EXPORT_COLUMNS",
    "FUNCTION_COLUMNS",
    "ManifestError",
    "VARIABLE_COLUMNS",
    "build_document",
    "build_module_doc",
]
