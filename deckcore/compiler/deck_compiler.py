#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Deck Compiler

Segments a flat block stream into slides in a single forward pass:
- Track the running section and topic
- Open a slide on every slide marker, snapshotting section/topic
- Attach subheadings and content to the open slide
- Decide which slides introduce a new outline bookmark

Version: 1.0.0
"""

from typing import Iterable, List, Optional
from dataclasses import dataclass, field
import logging

from deckcore.contracts import (
    Block,
    BlockKind,
    BodyBlock,
    CompiledDeck,
    SlideRecord,
)

logger = logging.getLogger(__name__)


@dataclass
class OpenSlide:
    """A slide that has been opened but not yet finalized"""
    title: str
    section: str
    topic: str
    body: List[BodyBlock] = field(default_factory=list)


@dataclass
class CompilerState:
    """Running state of one compile call"""
    current_section: str = ""
    current_topic: str = ""
    # None means nothing bookmarked yet, which is not the same as ""
    last_bookmarked_section: Optional[str] = None
    last_bookmarked_topic: Optional[str] = None
    open_slide: Optional[OpenSlide] = None
    dropped_blocks: int = 0

    def finalize(self) -> SlideRecord:
        """Close the open slide and decide its outline directives"""
        slide = self.open_slide
        self.open_slide = None

        outline_section = None
        if slide.section != self.last_bookmarked_section:
            outline_section = slide.section
            self.last_bookmarked_section = slide.section
            # A new section re-bookmarks its first topic even if the text repeats
            self.last_bookmarked_topic = None

        outline_topic = None
        if slide.topic != self.last_bookmarked_topic:
            outline_topic = slide.topic
            self.last_bookmarked_topic = slide.topic

        return SlideRecord(
            title=slide.title,
            body=tuple(slide.body),
            section=slide.section,
            topic=slide.topic,
            outline_section=outline_section,
            outline_topic=outline_topic,
        )


class DeckCompiler:
    """
    Compiles a block stream into slide records.

    Never fails on unusual marker orderings: content before the first
    slide is dropped, markers that no later slide observes are absorbed.

    Usage:
        compiler = DeckCompiler()
        slides = compiler.compile(blocks)
    """

    def __init__(self, warn_dropped_content: bool = True):
        """
        Initialize deck compiler.

        Args:
            warn_dropped_content: Log a warning when content precedes the first slide
        """
        self.warn_dropped_content = warn_dropped_content

    def compile(self, blocks: Iterable[Block]) -> List[SlideRecord]:
        """
        Compile a block stream.

        Args:
            blocks: Ordered block stream

        Returns:
            Ordered slide records, one per slide marker
        """
        return self.compile_deck(blocks).slides

    def compile_deck(self, blocks: Iterable[Block]) -> CompiledDeck:
        """
        Compile a block stream into a CompiledDeck contract.

        Args:
            blocks: Ordered block stream

        Returns:
            CompiledDeck with slides and the number of dropped blocks
        """
        state = CompilerState()
        slides: List[SlideRecord] = []

        for block in blocks:
            self._step(state, block, slides)

        if state.open_slide is not None:
            slides.append(state.finalize())

        if state.dropped_blocks and self.warn_dropped_content:
            logger.warning(
                f"Dropped {state.dropped_blocks} block(s) authored before the first slide"
            )

        logger.info(f"Compiled {len(slides)} slides")

        return CompiledDeck(slides=slides, dropped_blocks=state.dropped_blocks)

    def _step(self, state: CompilerState, block: Block, slides: List[SlideRecord]) -> None:
        """Apply one block to the compiler state"""
        kind = block.kind

        if kind is BlockKind.SECTION:
            state.current_section = block.text
            state.current_topic = ""

        elif kind is BlockKind.TOPIC:
            state.current_topic = block.text

        elif kind is BlockKind.SLIDE:
            if state.open_slide is not None:
                slides.append(state.finalize())
            state.open_slide = OpenSlide(
                title=block.title,
                section=state.current_section,
                topic=state.current_topic,
            )

        elif kind in (BlockKind.SUBHEADING, BlockKind.CONTENT):
            if state.open_slide is None:
                state.dropped_blocks += 1
                logger.debug(f"Dropping {kind.value} block before first slide")
            else:
                state.open_slide.body.append(block)

        else:
            raise TypeError(f"Unhandled block kind: {kind}")


def compile_blocks(blocks: Iterable[Block]) -> List[SlideRecord]:
    """Compile a block stream with default settings"""
    return DeckCompiler().compile(blocks)
