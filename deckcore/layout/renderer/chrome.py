#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Chrome Renderer

Draws the header bar, footer bar and per-slide title band from resolved
text and style values. Holds no state between pages.

Version: 1.0.0
"""

from dataclasses import dataclass
from typing import List, Optional

from reportlab.lib.colors import white
from reportlab.platypus import Paragraph
from reportlab.platypus.flowables import Flowable, HRFlowable

from config.constants import (
    CHROME_PADDING,
    FOOTER_GAP,
    FOOTER_HEIGHT_RATIO,
    HEADER_HEIGHT_RATIO,
    TITLE_BAND_PADDING,
)
from ..pagination.footer_sizing import Measure, text_measure
from ..style.resolver import ResolvedStyle
from .markup import escape_text


@dataclass(frozen=True)
class FooterPlacement:
    """Where the footer of one page was drawn"""
    page: int
    label: str
    label_box_width: float
    label_x: float  # left edge of the page label box
    date_x: float   # left edge of the date text


class ChromeRenderer:
    """
    Renders header and footer bars on a canvas.

    Usage:
        chrome = ChromeRenderer(style)
        chrome.draw_header(canvas, "Section", "Topic")
        placement = chrome.draw_footer(canvas, page=1, label="1/9", label_width=w)
    """

    def __init__(self, style: ResolvedStyle):
        self.style = style
        self.font = style.text_font
        self.font_size = style.chrome_size
        self.measure: Measure = text_measure(self.font, self.font_size)

    @property
    def header_height(self) -> float:
        return self.style.chrome_size * HEADER_HEIGHT_RATIO

    @property
    def footer_height(self) -> float:
        return self.style.chrome_size * FOOTER_HEIGHT_RATIO

    def _baseline(self, bar_bottom: float, bar_height: float) -> float:
        """Vertically centre chrome text in a bar"""
        return bar_bottom + (bar_height - self.font_size * 0.7) / 2

    def draw_header(self, canvas, section: str, topic: str):
        """Header bar: section on the left, topic on the right"""
        width, height = self.style.page_size
        bar_bottom = height - self.header_height

        canvas.setFillColor(self.style.color)
        canvas.rect(0, bar_bottom, width, self.header_height, stroke=0, fill=1)

        canvas.setFillColor(white)
        canvas.setFont(self.font, self.font_size)
        y = self._baseline(bar_bottom, self.header_height)
        if section:
            canvas.drawString(CHROME_PADDING, y, section)
        if topic:
            canvas.drawRightString(width - CHROME_PADDING, y, topic)

    def draw_footer(
        self,
        canvas,
        page: int,
        label: Optional[str],
        label_width: float,
    ) -> FooterPlacement:
        """
        Footer bar: identity left, short title centre, date + page label right.

        The page label is right-aligned inside a box of label_width; the date
        ends FOOTER_GAP before that box.

        Args:
            canvas: reportlab canvas
            page: Page number being drawn
            label: Page label, or None to reserve the box without drawing
            label_width: Document-wide page label box width

        Returns:
            FooterPlacement describing the drawn footer
        """
        width = self.style.page_width
        style = self.style

        canvas.setFillColor(style.color)
        canvas.rect(0, 0, width, self.footer_height, stroke=0, fill=1)

        canvas.setFillColor(white)
        canvas.setFont(self.font, self.font_size)
        y = self._baseline(0, self.footer_height)

        if style.identity:
            canvas.drawString(CHROME_PADDING, y, style.identity)
        if style.short_title:
            canvas.drawCentredString(width / 2, y, style.short_title)

        right = width - CHROME_PADDING
        label_x = right - label_width
        if label:
            canvas.drawRightString(right, y, label)

        date_right = label_x - FOOTER_GAP
        date_x = date_right
        if style.date:
            date_x = date_right - self.measure(style.date)
            canvas.drawString(date_x, y, style.date)

        return FooterPlacement(
            page=page,
            label=label or "",
            label_box_width=label_width,
            label_x=label_x,
            date_x=date_x,
        )

    def title_band(self, title: str, paragraph_style) -> List[Flowable]:
        """Slide title followed by a rule in the deck colour"""
        return [
            Paragraph(escape_text(title), paragraph_style),
            HRFlowable(
                width="100%",
                thickness=1.2,
                color=self.style.color,
                spaceBefore=TITLE_BAND_PADDING / 2,
                spaceAfter=TITLE_BAND_PADDING,
            ),
        ]
