"""
Readers turning authored text into the block stream.
"""

from .markdown_reader import MarkdownReader, read_markdown, read_markdown_file

__all__ = [
    "MarkdownReader",
    "read_markdown",
    "read_markdown_file",
]
