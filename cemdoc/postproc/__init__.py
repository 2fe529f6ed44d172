"""Markdown serialization and clean-up."""

from .lint import MarkdownLinter
from .serialize import MarkdownSerializer

__all__ = ["MarkdownLinter", "MarkdownSerializer"]
