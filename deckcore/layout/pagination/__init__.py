"""
Two-phase pagination and footer sizing.

The engine lives in deckcore.layout.pagination.engine; it depends on the
renderer, which in turn depends on the footer sizing exported here.
"""

from .footer_sizing import (
    FooterMetrics,
    Measure,
    PageCount,
    max_label_width,
    page_label,
    text_measure,
)

__all__ = [
    "FooterMetrics",
    "Measure",
    "PageCount",
    "max_label_width",
    "page_label",
    "text_measure",
]
