#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pagination Engine

Two-phase layout for page-aware footers:

1. layout_pass(): lay out the whole deck in memory with no footer and
   return the converged page count as a PageCount.
2. render_pass(page_count, ...): size the page label box for 1/N .. N/N,
   lay out again with real footers and write the file.

render_pass() requires the PageCount produced by phase 1, so the final
footer is never drawn before the page count exists.

Version: 1.0.0
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Union
import io
import logging
import os
import tempfile

from deckcore.contracts import PaginationError, SlideRecord
from ..renderer.chrome import FooterPlacement
from ..renderer.pdf_renderer import DeckPDFRenderer, OutlineEntry
from .footer_sizing import FooterMetrics, PageCount

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Outcome of a completed two-phase render"""
    output_path: Path
    page_count: PageCount
    label_width: float
    placements: List[FooterPlacement] = field(default_factory=list)
    outline: List[OutlineEntry] = field(default_factory=list)

    def to_dict(self):
        return {
            "output_path": str(self.output_path),
            "pages": self.page_count.total,
            "label_width": round(self.label_width, 3),
            "outline": [(e.level, e.title, e.page) for e in self.outline],
        }


class PaginationEngine:
    """
    Drives the provisional and final layout passes.

    Usage:
        engine = PaginationEngine(renderer, slides)
        page_count = engine.layout_pass()
        result = engine.render_pass(page_count, "deck.pdf")

        # or both at once
        result = engine.run("deck.pdf")
    """

    def __init__(self, renderer: DeckPDFRenderer, slides: Sequence[SlideRecord]):
        self.renderer = renderer
        self.slides = list(slides)

    def layout_pass(self) -> PageCount:
        """
        Phase 1: provisional full layout with an empty footer.

        Returns:
            PageCount of the converged layout
        """
        stats = self.renderer.build(self.slides, io.BytesIO(), footer=None)
        page_count = PageCount(stats.pages)
        logger.info(f"Provisional layout: {page_count.total} pages")
        return page_count

    def render_pass(self, page_count: PageCount, output_path: Union[str, Path]) -> RenderResult:
        """
        Phase 2: final layout with footers sized for page_count.

        Writes to a temporary file next to output_path and moves it into
        place only when the pass succeeds.

        Args:
            page_count: Result of layout_pass()
            output_path: Destination PDF path

        Returns:
            RenderResult

        Raises:
            PaginationError: final pass produced a different page count
            LayoutError: layout or measurement failed
        """
        if not isinstance(page_count, PageCount):
            raise TypeError("render_pass() needs the PageCount returned by layout_pass()")

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        footer = FooterMetrics.from_page_count(page_count, self.renderer.chrome.measure)
        logger.info(f"Page label box: {footer.label_width:.2f}pt for {page_count.total} pages")

        fd, tmp_name = tempfile.mkstemp(suffix=".pdf.part", dir=str(output_path.parent))
        os.close(fd)
        tmp_path = Path(tmp_name)

        try:
            stats = self.renderer.build(self.slides, str(tmp_path), footer=footer)
            if stats.pages != page_count.total:
                raise PaginationError(page_count.total, stats.pages)
            os.replace(tmp_path, output_path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.info(f"PDF saved: {output_path}")

        return RenderResult(
            output_path=output_path,
            page_count=page_count,
            label_width=footer.label_width,
            placements=stats.placements,
            outline=stats.outline,
        )

    def run(self, output_path: Union[str, Path]) -> RenderResult:
        """Both passes in order"""
        return self.render_pass(self.layout_pass(), output_path)
