#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Compiled Deck Contract

Defines the output of the deck compiler: an ordered sequence of slide
records with their header-state snapshot and outline directives.

Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Tuple

from .base import BaseContract
from .blocks import BodyBlock, block_to_dict, block_from_dict


@dataclass(frozen=True)
class SlideRecord:
    """
    One printable slide.

    section/topic are the running header values at the moment the slide
    opened. outline_section/outline_topic are None when the slide does not
    introduce a new bookmark; an empty string is a real (empty) value.
    """
    title: str
    body: Tuple[BodyBlock, ...] = ()
    section: str = ""
    topic: str = ""
    outline_section: Optional[str] = None
    outline_topic: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "body": [block_to_dict(b) for b in self.body],
            "section": self.section,
            "topic": self.topic,
            "outline_section": self.outline_section,
            "outline_topic": self.outline_topic,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SlideRecord':
        return cls(
            title=data["title"],
            body=tuple(block_from_dict(b) for b in data.get("body", [])),
            section=data.get("section", ""),
            topic=data.get("topic", ""),
            outline_section=data.get("outline_section"),
            outline_topic=data.get("outline_topic"),
        )


@dataclass
class CompiledDeck(BaseContract):
    """
    Compiler output handed to the layout stage.

    Usage:
        deck = DeckCompiler().compile_deck(blocks)
        deck.assert_valid()
        print(deck.to_json())
    """
    slides: List[SlideRecord] = field(default_factory=list)
    dropped_blocks: int = 0

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    def outline(self) -> List[Tuple[int, str]]:
        """Outline directives in document order as (level, text) pairs"""
        entries: List[Tuple[int, str]] = []
        for slide in self.slides:
            if slide.outline_section is not None:
                entries.append((0, slide.outline_section))
            if slide.outline_topic is not None:
                entries.append((1, slide.outline_topic))
        return entries

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slides": [s.to_dict() for s in self.slides],
            "slide_count": self.slide_count,
            "dropped_blocks": self.dropped_blocks,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CompiledDeck':
        return cls(
            slides=[SlideRecord.from_dict(s) for s in data.get("slides", [])],
            dropped_blocks=data.get("dropped_blocks", 0),
        )

    def validate(self) -> List[str]:
        errors = []

        if self.dropped_blocks < 0:
            errors.append("dropped_blocks must not be negative")

        for i, slide in enumerate(self.slides):
            if slide.outline_section is not None and slide.outline_section != slide.section:
                errors.append(
                    f"Slide {i} ({slide.title!r}): outline section {slide.outline_section!r} "
                    f"differs from header section {slide.section!r}"
                )
            if slide.outline_topic is not None and slide.outline_topic != slide.topic:
                errors.append(
                    f"Slide {i} ({slide.title!r}): outline topic {slide.outline_topic!r} "
                    f"differs from header topic {slide.topic!r}"
                )

        return errors
