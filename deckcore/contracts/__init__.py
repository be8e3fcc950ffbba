#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Contracts Module

Data passed between the reader, the deck compiler and the layout stage,
plus the error taxonomy.
"""

from .base import (
    DeckError,
    ContractError,
    ContractValidationError,
    ConfigError,
    LayoutError,
    MeasurementError,
    PaginationError,
    BaseContract,
)
from .blocks import (
    BlockKind,
    ContentKind,
    SectionMarker,
    TopicMarker,
    SlideMarker,
    SubheadingMarker,
    Content,
    Block,
    BodyBlock,
    block_to_dict,
    block_from_dict,
)
from .deck import SlideRecord, CompiledDeck

__all__ = [
    # Errors
    "DeckError",
    "ContractError",
    "ContractValidationError",
    "ConfigError",
    "LayoutError",
    "MeasurementError",
    "PaginationError",
    "BaseContract",
    # Blocks
    "BlockKind",
    "ContentKind",
    "SectionMarker",
    "TopicMarker",
    "SlideMarker",
    "SubheadingMarker",
    "Content",
    "Block",
    "BodyBlock",
    "block_to_dict",
    "block_from_dict",
    # Deck
    "SlideRecord",
    "CompiledDeck",
]
