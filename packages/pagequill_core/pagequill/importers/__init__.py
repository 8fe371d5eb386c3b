"""Importers producing the block model from source markup."""

from .markdown_importer import MarkdownImporter, blocks_from_markdown

__all__ = ["MarkdownImporter", "blocks_from_markdown"]
