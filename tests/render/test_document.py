"""Tests for module and manifest assembly."""

from __future__ import annotations

import pytest

from cemdoc.config import RenderOptions
from cemdoc.mdast import Heading, Root, Table, heading, inline_code, text
from cemdoc.render.declarations import PRIVATE_API_OPEN, SEPARATOR
from cemdoc.render.document import ManifestError, build_document, build_module_doc
from tests._fixtures.manifest_builder import declaration, field, manifest, method, module


def _class_module():
    return module(
        "src/my-element.js",
        declarations=[
            declaration(
                "class",
                "MyElement",
                tagName="my-element",
                members=[field("first"), field("second"), field("hidden", "private")],
            )
        ],
    )


def _tables_titled(nodes, title):
    result = []
    for index, node in enumerate(nodes):
        if isinstance(node, Heading) and node.children == (text(title),):
            result.append(nodes[index + 1])
    return result


def test_hidden_policy_drops_private_fields_entirely() -> None:
    tree = build_document(manifest(_class_module()), RenderOptions(private="hidden"))

    (fields,) = _tables_titled(tree.children, "Fields")
    assert len(fields.children) - 1 == 2
    names = [row.children[0].children[0].value for row in fields.children[1:]]
    assert "hidden" not in names
    assert PRIVATE_API_OPEN not in tree.children


def test_details_policy_moves_private_fields_into_appendix() -> None:
    tree = build_document(manifest(_class_module()), RenderOptions(private="details"))
    nodes = list(tree.children)

    main, appendix = _tables_titled(nodes, "Fields")
    assert len(main.children) - 1 == 2
    assert len(appendix.children) - 1 == 1
    assert appendix.children[1].children[0].children == (text("hidden"),)
    assert nodes.index(PRIVATE_API_OPEN) < nodes.index(appendix)


def test_empty_module_contributes_nothing() -> None:
    empty = module("src/empty.js")

    assert build_module_doc(empty) is None
    assert build_document(manifest(empty)) == Root(children=())


def test_module_heading_and_module_level_tables() -> None:
    mod = module(
        "src/utils.js",
        declarations=[
            declaration("variable", "VERSION", type={"text": "string"}),
            declaration("function", "sum", parameters=[{"name": "a"}], **{"return": {"type": {"text": "number"}}}),
        ],
        exports=[
            {
                "kind": "js",
                "name": "sum",
                "declaration": {"name": "sum", "module": "src/utils.js"},
            }
        ],
    )

    nodes = build_module_doc(mod, RenderOptions())

    assert nodes[0] == heading(1, [inline_code("src/utils.js"), text(":")])
    titles = [(node.depth, node.children[0].value) for node in nodes[1:] if isinstance(node, Heading)]
    assert titles == [(2, "Variables"), (2, "Functions"), (2, "Exports")]
    assert nodes.count(SEPARATOR) == 2
    assert isinstance(nodes[-1], Table)
    export_row = nodes[-1].children[1]
    assert [cell.children[0].value for cell in export_row.children] == [
        "js",
        "sum",
        "sum",
        "src/utils.js",
        "",
    ]


def test_module_with_only_exports_is_rendered() -> None:
    mod = module("index.js", exports=[{"kind": "js", "name": "*"}])

    nodes = build_module_doc(mod)

    assert nodes is not None
    assert [n.children[0].value for n in nodes[1:] if isinstance(n, Heading)] == ["Exports"]


def test_separator_only_follows_emitted_declarations() -> None:
    mod = module(
        "a.js",
        declarations=[
            declaration("class", "A", members=[field("x")]),
            declaration("function", "f"),
        ],
    )

    nodes = build_module_doc(mod)

    # One separator after the class section and one after the Functions table.
    assert nodes.count(SEPARATOR) == 2
    assert nodes[-1] == SEPARATOR


def test_modules_and_declarations_keep_input_order() -> None:
    doc = manifest(
        module("b.js", declarations=[declaration("class", "Second"), declaration("class", "First")]),
        module("a.js", declarations=[declaration("mixin", "Third")]),
    )

    tree = build_document(doc)

    headings = [
        "".join(child.value for child in node.children)
        for node in tree.children
        if isinstance(node, Heading) and node.depth <= 2
    ]
    assert headings == [
        "b.js:",
        "class: Second",
        "class: First",
        "a.js:",
        "mixin: Third",
    ]


def test_rendering_twice_gives_equal_trees() -> None:
    doc = manifest(_class_module(), module("x.js", declarations=[declaration("class", "X", members=[method("m")])]))
    options = RenderOptions(private="details", heading_offset=1)

    assert build_document(doc, options) == build_document(doc, options)


def test_partial_manifest_entries_are_tolerated() -> None:
    doc = {"modules": [None, "junk", {"path": "p.js", "declarations": [42, {"kind": "class"}]}]}

    tree = build_document(doc)

    assert tree.children[0] == heading(1, [inline_code("p.js"), text(":")])
    assert tree.children[1] == heading(2, [text("class: "), inline_code("")])


@pytest.mark.parametrize("bad", [None, [], "modules", {"modules": None}, {"schemaVersion": "1"}])
def test_invalid_manifest_raises_at_document_boundary(bad) -> None:
    with pytest.raises(ManifestError):
        build_document(bad)


def _member_rows(tree) -> int:
    nodes = list(tree.children)
    return sum(
        len(table.children) - 1
        for title in ("Fields", "Methods")
        for table in _tables_titled(nodes, title)
    )


def test_member_rows_across_main_tables_and_appendix_grow_with_mode() -> None:
    doc = manifest(
        module(
            "a.js",
            declarations=[
                declaration(
                    "class",
                    "A",
                    members=[
                        field("open"),
                        field("shy", "protected"),
                        field("secret", "private"),
                        method("run"),
                        method("_tick", "private"),
                    ],
                )
            ],
        )
    )

    hidden = _member_rows(build_document(doc, RenderOptions(private="hidden")))
    details = _member_rows(build_document(doc, RenderOptions(private="details")))
    everything = _member_rows(build_document(doc, RenderOptions()))

    assert (hidden, details, everything) == (3, 5, 5)
    assert hidden <= details <= everything


def test_fully_filtered_variables_leave_no_separator() -> None:
    mod = module(
        "vars.js",
        declarations=[
            declaration("variable", "_a", privacy="private"),
            declaration("variable", "_b", privacy="private"),
        ],
    )

    nodes = build_module_doc(mod, RenderOptions(private="hidden"))

    assert nodes == [heading(1, [inline_code("vars.js"), text(":")])]
    assert SEPARATOR not in nodes
