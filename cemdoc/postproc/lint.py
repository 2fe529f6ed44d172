"""Whitespace clean-up for serialized Markdown."""

from __future__ import annotations

import re

_BLANK_RUN = re.compile(r"\n{3,}")


class MarkdownLinter:
    """Normalises line endings and trailing space, keeping single blank lines."""

    def lint(self, markdown: str) -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        stripped = "\n".join(line.rstrip() for line in normalized.split("\n"))
        collapsed = _BLANK_RUN.sub("\n\n", stripped).strip("\n")
        return f"{collapsed}\n" if collapsed else ""


__all__ = ["MarkdownLinter"]
