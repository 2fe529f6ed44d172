"""Reading manifests and writing rendered Markdown."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

from .logging import get_logger
from .render.document import ManifestError

STDIO_MARKER = "-"

logger = get_logger("manifest_io")


def load_manifest(path: str | Path, *, stdin: Optional[TextIO] = None) -> Any:
    """Parse a JSON manifest from ``path`` (``-`` reads standard input)."""
    if str(path) == STDIO_MARKER:
        source = "<stdin>"
        raw = (stdin or sys.stdin).read()
    else:
        manifest_path = Path(path).expanduser()
        source = str(manifest_path)
        if not manifest_path.is_file():
            raise ManifestError(f"Manifest not found: {manifest_path}")
        raw = manifest_path.read_text(encoding="utf-8")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest {source} is not valid JSON: {exc}") from exc
    logger.debug("Loaded manifest from %s", source)
    return data


def write_output(markdown: str, path: str | Path | None, *, stdout: Optional[TextIO] = None) -> Optional[Path]:
    """Write ``markdown`` to ``path``; ``None`` or ``-`` write to standard output."""
    if path is None or str(path) == STDIO_MARKER:
        (stdout or sys.stdout).write(markdown)
        return None
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(markdown, encoding="utf-8")
    logger.info("Wrote %s", target)
    return target


__all__ = ["STDIO_MARKER", "load_manifest", "write_output"]
