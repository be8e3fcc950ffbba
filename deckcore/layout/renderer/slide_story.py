#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Slide Story Builder

Turns slide records into ReportLab flowables: an anchor carrying the
record, the title band and the body.

Version: 1.0.0
"""

from typing import Any, Dict, List

from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, Preformatted
from reportlab.platypus.flowables import Flowable

from config.constants import LINE_SPACING
from deckcore.contracts import (
    BlockKind,
    BodyBlock,
    ContentKind,
    SlideRecord,
)
from ..style.resolver import ResolvedStyle
from .markup import escape_text, to_markup


class SlideAnchor(Flowable):
    """
    Zero-size marker placed at the top of every slide.

    The document template picks it up after it is drawn to update the
    running header and emit outline bookmarks on the right page.
    """

    def __init__(self, index: int, record: SlideRecord):
        super().__init__()
        self.index = index
        self.record = record
        self.width = self.height = 0

    def wrap(self, availWidth, availHeight):
        return 0, 0

    def draw(self):
        pass

    def __repr__(self):
        return f"SlideAnchor({self.index}, {self.record.title!r})"


class SlideStoryBuilder:
    """
    Builds flowables for slide bodies.

    Usage:
        builder = SlideStoryBuilder(style)
        flowables = builder.body(record.body)
    """

    def __init__(self, style: ResolvedStyle):
        self.style = style
        self.styles = self._create_styles()

    def _create_styles(self) -> Dict[str, ParagraphStyle]:
        """Create paragraph styles for slide content and the title page"""
        s = self.style
        styles: Dict[str, ParagraphStyle] = {}

        styles["Body"] = ParagraphStyle(
            "Body",
            fontName=s.text_font,
            fontSize=s.font_size,
            leading=s.font_size * LINE_SPACING,
            alignment=TA_LEFT,
            spaceAfter=s.font_size * 0.4,
        )

        styles["Bullet"] = ParagraphStyle(
            "Bullet",
            parent=styles["Body"],
            leftIndent=s.font_size * 1.2,
            bulletIndent=s.font_size * 0.3,
            spaceAfter=s.font_size * 0.2,
        )

        styles["Quote"] = ParagraphStyle(
            "Quote",
            parent=styles["Body"],
            leftIndent=s.font_size * 1.5,
            rightIndent=s.font_size * 1.5,
            textColor=s.color,
        )

        styles["Code"] = ParagraphStyle(
            "Code",
            fontName=s.mono_font,
            fontSize=s.mono_size,
            leading=s.mono_size * LINE_SPACING,
            leftIndent=s.font_size * 0.5,
            spaceBefore=s.font_size * 0.2,
            spaceAfter=s.font_size * 0.4,
        )

        styles["Math"] = ParagraphStyle(
            "Math",
            parent=styles["Body"],
            fontName=s.math_font,
            alignment=TA_CENTER,
            spaceBefore=s.font_size * 0.2,
        )

        styles["Subheading"] = ParagraphStyle(
            "Subheading",
            parent=styles["Body"],
            fontName=s.heading_font,
            textColor=s.color,
            spaceBefore=s.font_size * 0.3,
            spaceAfter=s.font_size * 0.2,
        )

        styles["SlideTitle"] = ParagraphStyle(
            "SlideTitle",
            fontName=s.heading_font,
            fontSize=s.heading_size,
            leading=s.heading_size * LINE_SPACING,
            textColor=s.color,
        )

        # Title page: no space before/after so group heights are exact
        styles["DeckTitle"] = ParagraphStyle(
            "DeckTitle",
            fontName=s.heading_font,
            fontSize=s.heading_size * 1.4,
            leading=s.heading_size * 1.4 * LINE_SPACING,
            alignment=TA_CENTER,
            textColor=s.color,
        )

        styles["DeckSubtitle"] = ParagraphStyle(
            "DeckSubtitle",
            fontName=s.text_font,
            fontSize=s.heading_size,
            leading=s.heading_size * LINE_SPACING,
            alignment=TA_CENTER,
        )

        styles["DeckInfo"] = ParagraphStyle(
            "DeckInfo",
            fontName=s.text_font,
            fontSize=s.font_size,
            leading=s.font_size * LINE_SPACING,
            alignment=TA_CENTER,
        )

        return styles

    def body(self, blocks) -> List[Any]:
        """Flowables for a slide body, in order"""
        return [self._render_block(block) for block in blocks]

    def _render_block(self, block: BodyBlock) -> Flowable:
        """Render a single body block to a flowable"""
        mono = self.style.mono_font

        if block.kind is BlockKind.SUBHEADING:
            return Paragraph(to_markup(block.text, mono), self.styles["Subheading"])

        kind = block.content_kind

        if kind is ContentKind.CODE:
            return Preformatted(block.text, self.styles["Code"])
        if kind is ContentKind.MATH:
            return Paragraph(escape_text(block.text).replace("\n", "<br/>"), self.styles["Math"])
        if kind is ContentKind.BULLET:
            return Paragraph(to_markup(block.text, mono), self.styles["Bullet"], bulletText="•")
        if kind is ContentKind.NUMBERED:
            return Paragraph(
                to_markup(block.text, mono),
                self.styles["Bullet"],
                bulletText=f"{block.number}.",
            )
        if kind is ContentKind.QUOTE:
            return Paragraph(to_markup(block.text, mono), self.styles["Quote"])

        return Paragraph(to_markup(block.text, mono), self.styles["Body"])
