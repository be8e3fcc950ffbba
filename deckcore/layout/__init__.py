#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Module

Turns compiled slides into a paginated PDF.

Components:
- StyleResolver: Resolve deck configuration
- DeckPDFRenderer: Title page, slides, header and footer chrome
- PaginationEngine: Two-phase layout with page-aware footers
- DeckAgent: End-to-end pipeline

Usage:
    from deckcore.layout import DeckAgent

    agent = DeckAgent(config)
    result = agent.process("talk.md", "talk.pdf")

Version: 1.0.0
"""

from .agent import DeckAgent
from .pagination.engine import PaginationEngine, RenderResult
from .pagination.footer_sizing import FooterMetrics, PageCount
from .renderer.pdf_renderer import DeckPDFRenderer
from .style import DeckConfig, ResolvedStyle, StyleResolver, load_deck_config

__all__ = [
    "DeckAgent",
    "PaginationEngine",
    "RenderResult",
    "FooterMetrics",
    "PageCount",
    "DeckPDFRenderer",
    "DeckConfig",
    "ResolvedStyle",
    "StyleResolver",
    "load_deck_config",
]

__version__ = "1.0.0"
