#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Deck Agent

Main orchestrator: authored markdown -> block stream -> slides -> PDF.

Version: 1.0.0
"""

from typing import Iterable, Optional, Union
from pathlib import Path
import logging

from deckcore.compiler import DeckCompiler
from deckcore.contracts import Block, CompiledDeck
from deckcore.reader import read_markdown, read_markdown_file

from .pagination.engine import PaginationEngine, RenderResult
from .renderer.pdf_renderer import DeckPDFRenderer
from .style import DeckConfig, ResolvedStyle, StyleResolver

logger = logging.getLogger(__name__)


class DeckAgent:
    """
    Compiles and renders slide decks.

    Responsibilities:
    1. Read authored markdown into a block stream
    2. Compile the stream into slide records
    3. Resolve the deck style
    4. Paginate and render to PDF

    Usage:
        agent = DeckAgent(DeckConfig(title="Talk"))
        result = agent.process("talk.md", "talk.pdf")

        # Or step by step:
        deck = agent.compile(blocks)
        result = agent.render(deck, "talk.pdf")
    """

    def __init__(
        self,
        config: Optional[DeckConfig] = None,
        warn_dropped_content: bool = True,
    ):
        """
        Initialize Deck Agent.

        Args:
            config: Deck configuration (defaults apply when None)
            warn_dropped_content: Warn about content before the first slide
        """
        self.config = config or DeckConfig()
        self.compiler = DeckCompiler(warn_dropped_content=warn_dropped_content)
        self.resolver = StyleResolver()

        logger.info(f"DeckAgent initialized: {self.config.aspect_ratio}, title={self.config.title!r}")

    def process(self, source_path: Union[str, Path], output_path: Union[str, Path]) -> RenderResult:
        """
        Run the full pipeline on a markdown file.

        Args:
            source_path: Authored markdown file
            output_path: Output PDF path

        Returns:
            RenderResult
        """
        logger.info("Step 1: Reading source...")
        blocks = read_markdown_file(source_path)

        logger.info("Step 2: Compiling slides...")
        deck = self.compile(blocks)

        logger.info("Step 3: Rendering...")
        result = self.render(deck, output_path)

        logger.info(f"Output: {result.output_path} ({result.page_count.total} pages)")
        return result

    def process_text(self, text: str, output_path: Union[str, Path]) -> RenderResult:
        """Run the full pipeline on markdown text"""
        return self.render(self.compile(read_markdown(text)), output_path)

    def compile(self, blocks: Iterable[Block]) -> CompiledDeck:
        """Compile a block stream and check the result"""
        deck = self.compiler.compile_deck(blocks)
        deck.assert_valid()
        return deck

    def resolve_style(self) -> ResolvedStyle:
        return self.resolver.resolve(self.config)

    def render(self, deck: CompiledDeck, output_path: Union[str, Path]) -> RenderResult:
        """
        Paginate and render a compiled deck.

        Args:
            deck: Compiled deck
            output_path: Output PDF path

        Returns:
            RenderResult
        """
        renderer = DeckPDFRenderer(self.resolve_style())
        engine = PaginationEngine(renderer, deck.slides)
        return engine.run(output_path)
