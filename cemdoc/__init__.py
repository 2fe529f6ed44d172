"""Render custom elements manifests as Markdown documentation."""

from __future__ import annotations

from typing import Any

from .config import ConfigError, RenderOptions
from .converter import Converter
from .render.document import ManifestError, build_document


def render_markdown(manifest: Any, options: RenderOptions | None = None) -> str:
    """Render ``manifest`` to Markdown text."""
    return Converter().render(manifest, options)


__all__ = [
    "ConfigError",
    "Converter",
    "ManifestError",
    "RenderOptions",
    "build_document",
    "render_markdown",
]
