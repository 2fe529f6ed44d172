"""Declarative rendering of custom elements manifests into document trees."""

from .declarations import DeclarationRenderer
from .descriptors import Column, Descriptor, project_column, resolve_descriptor
from .document import ManifestError, build_document, build_module_doc
from .tables import TableBuilder, privacy_filter

__all__ = [
    "Column",
    "DeclarationRenderer",
    "Descriptor",
    "ManifestError",
    "TableBuilder",
    "build_document",
    "build_module_doc",
    "privacy_filter",
    "project_column",
    "resolve_descriptor",
]
