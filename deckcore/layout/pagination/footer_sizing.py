#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Footer Sizing

The page label "current/total" is right-aligned in a box whose width is
the widest label of the whole document, so the date placed beside it
sits at the same x-offset on every page. The widest label depends on the
total page count, which only a completed layout pass can provide.

Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Callable

from reportlab.pdfbase import pdfmetrics

from config.constants import PAGE_LABEL_SEPARATOR
from deckcore.contracts import MeasurementError

Measure = Callable[[str], float]


@dataclass(frozen=True)
class PageCount:
    """Final page count of a converged layout pass"""
    total: int

    def __post_init__(self):
        if self.total < 1:
            raise ValueError(f"page count must be positive, got {self.total}")


@dataclass(frozen=True)
class FooterMetrics:
    """Document-wide footer geometry, fixed once the page count is known"""
    page_count: PageCount
    label_width: float

    @classmethod
    def from_page_count(cls, page_count: PageCount, measure: Measure) -> 'FooterMetrics':
        return cls(page_count=page_count, label_width=max_label_width(page_count, measure))

    def label(self, current: int) -> str:
        return page_label(current, self.page_count.total)


def page_label(current: int, total: int) -> str:
    """Footer page label, e.g. 3/12"""
    return f"{current}{PAGE_LABEL_SEPARATOR}{total}"


def max_label_width(page_count: PageCount, measure: Measure) -> float:
    """Widest label over 1/N .. N/N"""
    total = page_count.total
    return max(measure(page_label(i, total)) for i in range(1, total + 1))


def text_measure(font_name: str, font_size: float) -> Measure:
    """
    Build a width function for one font.

    Raises:
        MeasurementError: the layout engine cannot measure with this font
    """
    def measure(text: str) -> float:
        try:
            return pdfmetrics.stringWidth(text, font_name, font_size)
        except Exception as e:
            raise MeasurementError(
                f"Cannot measure {text!r} in {font_name} {font_size}pt: {e}"
            ) from e

    return measure
