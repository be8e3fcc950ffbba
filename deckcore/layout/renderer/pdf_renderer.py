#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Deck PDF Renderer

Lays out the title page and compiled slides with ReportLab. One call to
build() is one full layout pass; the pagination engine drives two of them.

Features:
- Running header (section / topic) from the slide occupying the page
- Title band per slide
- Footer with a document-wide page label box
- Outline bookmarks for section and topic changes

Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Any, BinaryIO, List, Optional, Sequence, Tuple, Union
import logging

from reportlab.platypus import BaseDocTemplate, Frame, PageBreak, PageTemplate

from config.constants import PAGE_MARGIN_X
from deckcore.contracts import LayoutError, SlideRecord
from ..pagination.footer_sizing import FooterMetrics
from ..style.resolver import ResolvedStyle
from .chrome import ChromeRenderer, FooterPlacement
from .slide_story import SlideAnchor, SlideStoryBuilder
from .title_page import TitlePageComposer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutlineEntry:
    """A bookmark written to the PDF outline"""
    level: int
    title: str
    page: int


@dataclass
class BuildStats:
    """What one layout pass produced"""
    pages: int = 0
    placements: List[FooterPlacement] = field(default_factory=list)
    outline: List[OutlineEntry] = field(default_factory=list)


class DeckDocTemplate(BaseDocTemplate):
    """
    Document template tracking the slide on the current page.

    SlideAnchor flowables update current_slide as they are laid out, so
    the chrome drawn at page end always reflects the page's slide.
    """

    def __init__(self, filename, chrome: ChromeRenderer, footer: Optional[FooterMetrics], **kw):
        super().__init__(filename, **kw)
        self.chrome = chrome
        self.footer_metrics = footer
        self.current_slide: Optional[SlideRecord] = None
        self.pass_stats = BuildStats()
        self._section_open = False

    def afterFlowable(self, flowable):
        if isinstance(flowable, SlideAnchor):
            self.current_slide = flowable.record
            self._bookmark(flowable)

    def _bookmark(self, anchor: SlideAnchor):
        """Emit outline entries introduced by this slide"""
        record = anchor.record

        if record.outline_section is not None:
            self._section_open = bool(record.outline_section)
            if record.outline_section:
                self._add_outline(f"s{anchor.index}", record.outline_section, 0)

        if record.outline_topic:
            level = 1 if self._section_open else 0
            self._add_outline(f"t{anchor.index}", record.outline_topic, level)

    def _add_outline(self, key: str, title: str, level: int):
        self.canv.bookmarkPage(key)
        self.canv.addOutlineEntry(title, key, level=level, closed=False)
        if not self.pass_stats.outline:
            self.canv.showOutline()
        self.pass_stats.outline.append(OutlineEntry(level=level, title=title, page=self.page))

    def draw_chrome(self, canvas, doc):
        """Page-end callback: header for slide pages, footer for every page"""
        canvas.saveState()

        if self.current_slide is not None:
            self.chrome.draw_header(canvas, self.current_slide.section, self.current_slide.topic)

        if self.footer_metrics is not None:
            placement = self.chrome.draw_footer(
                canvas,
                page=doc.page,
                label=self.footer_metrics.label(doc.page),
                label_width=self.footer_metrics.label_width,
            )
            self.pass_stats.placements.append(placement)

        canvas.restoreState()
        self.pass_stats.pages = max(self.pass_stats.pages, doc.page)


class DeckPDFRenderer:
    """
    Renders compiled slides to PDF.

    Usage:
        renderer = DeckPDFRenderer(style)
        stats = renderer.build(slides, "deck.pdf", footer_metrics)
    """

    def __init__(self, style: ResolvedStyle):
        """
        Initialize PDF renderer.

        Args:
            style: Resolved deck style
        """
        self.style = style
        self.chrome = ChromeRenderer(style)
        self.stories = SlideStoryBuilder(style)
        self.title_page = TitlePageComposer(style, self.stories.styles)

        logger.info(f"DeckPDFRenderer initialized: {style.page_width:.0f}x{style.page_height:.0f}pt")

    def frame_geometry(self) -> Tuple[float, float, float, float]:
        """Body frame (x, y, width, height) between header and footer bars"""
        width, height = self.style.page_size
        y = self.chrome.footer_height + self.style.font_size * 0.5
        top = height - self.chrome.header_height - self.style.font_size * 0.5
        return PAGE_MARGIN_X, y, width - 2 * PAGE_MARGIN_X, top - y

    def build_story(self, slides: Sequence[SlideRecord]) -> List[Any]:
        """Fresh flowables for one pass: title page, then one page per slide"""
        _, _, frame_width, frame_height = self.frame_geometry()

        story: List[Any] = self.title_page.compose(frame_width, frame_height)

        for index, record in enumerate(slides):
            story.append(PageBreak())
            story.append(SlideAnchor(index, record))
            story.extend(self.chrome.title_band(record.title, self.stories.styles["SlideTitle"]))
            story.extend(self.stories.body(record.body))

        return story

    def build(
        self,
        slides: Sequence[SlideRecord],
        output: Union[str, BinaryIO],
        footer: Optional[FooterMetrics] = None,
    ) -> BuildStats:
        """
        Run one full layout pass.

        Args:
            slides: Compiled slides
            output: File path or binary stream
            footer: Footer metrics; None draws no footer (provisional pass)

        Returns:
            BuildStats of the pass

        Raises:
            LayoutError: the layout engine failed
        """
        x, y, width, height = self.frame_geometry()
        style = self.style

        doc = DeckDocTemplate(
            output,
            chrome=self.chrome,
            footer=footer,
            pagesize=style.page_size,
            leftMargin=0,
            rightMargin=0,
            topMargin=0,
            bottomMargin=0,
            title=style.title,
            author=style.author,
            subject=style.subtitle,
        )
        frame = Frame(
            x, y, width, height,
            leftPadding=0, rightPadding=0, topPadding=0, bottomPadding=0,
            id="body",
        )
        doc.addPageTemplates([PageTemplate(id="slide", frames=[frame], onPageEnd=doc.draw_chrome)])

        try:
            doc.build(self.build_story(slides))
        except LayoutError:
            raise
        except Exception as e:
            raise LayoutError(f"Layout failed: {type(e).__name__}: {e}") from e

        logger.debug(f"Layout pass: {doc.pass_stats.pages} pages, {len(doc.pass_stats.outline)} outline entries")
        return doc.pass_stats
