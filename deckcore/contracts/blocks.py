#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Block Stream Contract

The block stream is the compiler's input: structural markers plus
ordinary content, produced by the reader and immutable afterwards.

Marker depths of the authored markup:
    depth 1 -> SectionMarker
    depth 2 -> TopicMarker
    depth 3 -> SlideMarker (also the slide's printed title)
    depth 4 -> SubheadingMarker (printed, never affects segmentation)

Version: 1.0.0
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Any, Union
from enum import Enum


class BlockKind(Enum):
    """Tag of a block in the stream"""
    SECTION = "section"
    TOPIC = "topic"
    SLIDE = "slide"
    SUBHEADING = "subheading"
    CONTENT = "content"


class ContentKind(Enum):
    """Types of ordinary content"""
    PARAGRAPH = "paragraph"
    BULLET = "bullet"
    NUMBERED = "numbered"
    QUOTE = "quote"
    CODE = "code"
    MATH = "math"


@dataclass(frozen=True)
class SectionMarker:
    text: str
    kind: ClassVar[BlockKind] = BlockKind.SECTION


@dataclass(frozen=True)
class TopicMarker:
    text: str
    kind: ClassVar[BlockKind] = BlockKind.TOPIC


@dataclass(frozen=True)
class SlideMarker:
    title: str
    kind: ClassVar[BlockKind] = BlockKind.SLIDE


@dataclass(frozen=True)
class SubheadingMarker:
    text: str
    kind: ClassVar[BlockKind] = BlockKind.SUBHEADING


@dataclass(frozen=True)
class Content:
    """Ordinary content. Opaque to the compiler."""
    text: str
    content_kind: ContentKind = ContentKind.PARAGRAPH
    number: int = 0  # position within a numbered list
    kind: ClassVar[BlockKind] = BlockKind.CONTENT


Block = Union[SectionMarker, TopicMarker, SlideMarker, SubheadingMarker, Content]

# What a slide body may hold
BodyBlock = Union[SubheadingMarker, Content]


def block_to_dict(block: Block) -> Dict[str, Any]:
    """Serialize a block to a dictionary"""
    if block.kind is BlockKind.SLIDE:
        return {"kind": block.kind.value, "title": block.title}
    data: Dict[str, Any] = {"kind": block.kind.value, "text": block.text}
    if block.kind is BlockKind.CONTENT:
        data["content_kind"] = block.content_kind.value
        if block.number:
            data["number"] = block.number
    return data


def block_from_dict(data: Dict[str, Any]) -> Block:
    """Create a block from its dictionary form"""
    kind = BlockKind(data["kind"])

    if kind is BlockKind.SECTION:
        return SectionMarker(data["text"])
    if kind is BlockKind.TOPIC:
        return TopicMarker(data["text"])
    if kind is BlockKind.SLIDE:
        return SlideMarker(data["title"])
    if kind is BlockKind.SUBHEADING:
        return SubheadingMarker(data["text"])
    return Content(
        text=data["text"],
        content_kind=ContentKind(data.get("content_kind", "paragraph")),
        number=data.get("number", 0),
    )
