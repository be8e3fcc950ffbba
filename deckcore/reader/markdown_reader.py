#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Markdown Reader

Turns authored markdown into the block stream consumed by the compiler.

    # Section          -> SectionMarker
    ## Topic           -> TopicMarker
    ### Slide title    -> SlideMarker
    #### Subheading    -> SubheadingMarker

Everything else (paragraphs, lists, quotes, fenced code, $$ math) is Content.

Version: 1.0.0
"""

import re
import logging
from pathlib import Path
from typing import List, Optional, Union

from deckcore.contracts import (
    Block,
    Content,
    ContentKind,
    SectionMarker,
    SlideMarker,
    SubheadingMarker,
    TopicMarker,
)

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r'^(#{1,6})(?:\s+(.*?))?(?:\s+#+)?\s*$')
BULLET_RE = re.compile(r'^\s*[-*+]\s+(.*)$')
NUMBERED_RE = re.compile(r'^\s*(\d+)[.)]\s+(.*)$')
QUOTE_RE = re.compile(r'^\s*>\s?(.*)$')
INLINE_MATH_BLOCK_RE = re.compile(r'^\$\$(.+)\$\$$')

MARKERS = {
    1: SectionMarker,
    2: TopicMarker,
    3: SlideMarker,
    4: SubheadingMarker,
}


class MarkdownReader:
    """
    Line-based markdown reader.

    Usage:
        reader = MarkdownReader()
        blocks = reader.read(text)
    """

    def __init__(self):
        self.blocks: List[Block] = []
        self._lines: List[str] = []
        self._kind: Optional[ContentKind] = None
        self._number = 0

    def read(self, text: str) -> List[Block]:
        """
        Parse markdown text.

        Args:
            text: Authored markdown

        Returns:
            Ordered block stream
        """
        self.blocks = []
        self._lines = []
        self._kind = None
        self._number = 0

        fence: Optional[ContentKind] = None
        fence_lines: List[str] = []

        for raw in text.splitlines():
            line = raw.rstrip()
            stripped = line.strip()

            # Inside a fenced block everything is verbatim
            if fence is not None:
                closing = "```" if fence is ContentKind.CODE else "$$"
                if stripped.startswith(closing):
                    self._emit(Content("\n".join(fence_lines), fence))
                    fence = None
                    fence_lines = []
                else:
                    fence_lines.append(line)
                continue

            if stripped.startswith("```"):
                self._flush()
                fence = ContentKind.CODE
                continue

            if stripped == "$$":
                self._flush()
                fence = ContentKind.MATH
                continue

            match = INLINE_MATH_BLOCK_RE.match(stripped)
            if match:
                self._flush()
                self._emit(Content(match.group(1).strip(), ContentKind.MATH))
                continue

            match = HEADING_RE.match(line)
            if match:
                self._flush()
                self._emit_heading(len(match.group(1)), (match.group(2) or "").strip())
                continue

            # Empty line = paragraph break
            if not stripped:
                self._flush()
                continue

            match = BULLET_RE.match(line)
            if match:
                self._start(ContentKind.BULLET, match.group(1))
                continue

            match = NUMBERED_RE.match(line)
            if match:
                self._start(ContentKind.NUMBERED, match.group(2), int(match.group(1)))
                continue

            match = QUOTE_RE.match(line)
            if match:
                if self._kind is not ContentKind.QUOTE:
                    self._start(ContentKind.QUOTE, match.group(1))
                else:
                    self._lines.append(match.group(1))
                continue

            # Continuation of the pending block, or a new paragraph
            if self._kind is None:
                self._start(ContentKind.PARAGRAPH, stripped)
            else:
                self._lines.append(stripped)

        if fence is not None:
            logger.warning(f"Unterminated {fence.value} block closed at end of input")
            self._emit(Content("\n".join(fence_lines), fence))

        self._flush()

        logger.debug(f"Read {len(self.blocks)} blocks")
        return self.blocks

    def _emit_heading(self, depth: int, text: str):
        marker = MARKERS.get(depth)
        if marker is None:
            self._emit(Content(text, ContentKind.PARAGRAPH))
        else:
            self._emit(marker(text))

    def _start(self, kind: ContentKind, text: str, number: int = 0):
        self._flush()
        self._kind = kind
        self._number = number
        self._lines = [text.strip()]

    def _flush(self):
        """Emit the pending paragraph/list item/quote"""
        if self._kind is not None:
            text = " ".join(part for part in self._lines if part)
            self._emit(Content(text, self._kind, self._number))
        self._kind = None
        self._number = 0
        self._lines = []

    def _emit(self, block: Block):
        self.blocks.append(block)


def read_markdown(text: str) -> List[Block]:
    """Parse markdown text into a block stream"""
    return MarkdownReader().read(text)


def read_markdown_file(path: Union[str, Path]) -> List[Block]:
    """Read a UTF-8 markdown file into a block stream"""
    path = Path(path)
    logger.info(f"Reading {path}")
    return read_markdown(path.read_text(encoding="utf-8"))
