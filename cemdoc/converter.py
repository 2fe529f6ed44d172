"""Pipeline that turns a manifest into linted Markdown."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .config import RenderOptions
from .logging import get_logger
from .manifest_io import load_manifest, write_output
from .postproc.lint import MarkdownLinter
from .postproc.serialize import MarkdownSerializer
from .render.document import build_document


@dataclass
class ConversionOutcome:
    """Result of converting a manifest file."""

    markdown: str
    path: Optional[Path]
    modules: int


class Converter:
    """Coordinates manifest loading, rendering, serialization and output."""

    def __init__(
        self,
        serializer: MarkdownSerializer | None = None,
        linter: MarkdownLinter | None = None,
    ) -> None:
        self.serializer = serializer or MarkdownSerializer()
        self.linter = linter or MarkdownLinter()
        self.logger = get_logger("converter")

    def render(self, manifest: Any, options: RenderOptions | None = None) -> str:
        """Render an in-memory manifest to Markdown text."""
        options = options or RenderOptions()
        tree = build_document(manifest, options)
        self.logger.debug("Document tree has %d top-level nodes", len(tree.children))
        return self.linter.lint(self.serializer.serialize(tree))

    def run(
        self,
        manifest_path: str | Path,
        output: str | Path | None = None,
        *,
        options: RenderOptions | None = None,
    ) -> ConversionOutcome:
        """Load ``manifest_path``, render it and write the result to ``output``."""
        self.logger.info("Rendering %s", manifest_path)
        manifest = load_manifest(manifest_path)
        markdown = self.render(manifest, options)
        written = write_output(markdown, output)
        return ConversionOutcome(
            markdown=markdown,
            path=written,
            modules=len(manifest.get("modules") or []),
        )


__all__ = ["ConversionOutcome", "Converter"]
