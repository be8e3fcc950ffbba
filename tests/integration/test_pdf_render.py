#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Integration: two-phase rendering of compiled decks to PDF

Lays out real decks with ReportLab and inspects the written files with
pypdf.
"""

from dataclasses import replace

import pytest
from pypdf import PdfReader
from reportlab.pdfbase import pdfmetrics

from deckcore.compiler import DeckCompiler
from deckcore.contracts import LayoutError, PaginationError
from deckcore.layout import DeckAgent, DeckConfig, DeckPDFRenderer, PageCount
from deckcore.layout.pagination.engine import PaginationEngine
from deckcore.reader import read_markdown


def flatten_outline(items, level=0):
    """pypdf nests child entries in a list after their parent"""
    entries = []
    for item in items:
        if isinstance(item, list):
            entries.extend(flatten_outline(item, level + 1))
        else:
            entries.append((level, item.title))
    return entries


@pytest.fixture
def agent(deck_config):
    return DeckAgent(deck_config)


class TestTwoPhaseRender:
    """Page count and footer geometry"""

    def test_ten_slides_give_eleven_pages(self, agent, make_deck_markdown, temp_dir):
        output = temp_dir / "deck.pdf"
        result = agent.process_text(make_deck_markdown(10), output)

        assert result.page_count.total == 11
        assert len(PdfReader(str(output)).pages) == 11

    def test_label_box_fits_widest_label(self, agent, resolved_style, make_deck_markdown, temp_dir):
        result = agent.process_text(make_deck_markdown(10), temp_dir / "deck.pdf")

        widest = max(
            pdfmetrics.stringWidth(f"{i}/11", resolved_style.text_font, resolved_style.chrome_size)
            for i in range(1, 12)
        )
        assert result.label_width == pytest.approx(widest)
        assert all(p.label_box_width == pytest.approx(widest) for p in result.placements)

    def test_date_at_same_offset_on_every_page(self, agent, make_deck_markdown, temp_dir):
        result = agent.process_text(make_deck_markdown(10), temp_dir / "deck.pdf")

        assert len(result.placements) == 11
        assert len({round(p.date_x, 6) for p in result.placements}) == 1
        assert len({round(p.label_x, 6) for p in result.placements}) == 1

    def test_every_page_labelled(self, agent, make_deck_markdown, temp_dir):
        result = agent.process_text(make_deck_markdown(3), temp_dir / "deck.pdf")
        assert [p.label for p in result.placements] == ["1/4", "2/4", "3/4", "4/4"]

    def test_zero_slides_give_title_page_only(self, agent, temp_dir):
        output = temp_dir / "empty.pdf"
        result = agent.process_text("Text before any slide.\n", output)

        assert result.page_count.total == 1
        assert len(PdfReader(str(output)).pages) == 1
        assert result.outline == []

    def test_4_3_page_size(self, deck_config, make_deck_markdown, temp_dir):
        agent = DeckAgent(deck_config.with_overrides(aspect_ratio="4-3"))
        output = temp_dir / "deck.pdf"
        agent.process_text(make_deck_markdown(1), output)

        box = PdfReader(str(output)).pages[0].mediabox
        assert float(box.width) == pytest.approx(793.7, abs=0.01)
        assert float(box.height) == pytest.approx(595.28, abs=0.01)

    def test_long_slide_overflows(self, agent, temp_dir):
        body = "\n\n".join(f"Paragraph {i} of a long slide." for i in range(40))
        result = agent.process_text(f"### Long\n{body}\n", temp_dir / "long.pdf")
        assert result.page_count.total > 2


class TestOutline:
    """Bookmarks in the written PDF"""

    def test_outline_levels(self, agent, sample_markdown, temp_dir):
        output = temp_dir / "deck.pdf"
        result = agent.process_text(sample_markdown, output)

        assert [(e.level, e.title) for e in result.outline] == [
            (0, "Introduction"),
            (1, "Motivation"),
            (0, "Design"),
            (1, "Segmentation"),
        ]
        assert flatten_outline(PdfReader(str(output)).outline) == [
            (0, "Introduction"),
            (1, "Motivation"),
            (0, "Design"),
            (1, "Segmentation"),
        ]

    def test_bookmarks_point_at_slide_pages(self, agent, sample_markdown, temp_dir):
        result = agent.process_text(sample_markdown, temp_dir / "deck.pdf")
        # Title page is page 1; "State machine" is the third slide
        assert [e.page for e in result.outline] == [2, 2, 4, 4]

    def test_repeated_section_bookmarked_once(self, agent, temp_dir):
        text = "# A\n### X\n# A\n### Y\n"
        result = agent.process_text(text, temp_dir / "deck.pdf")
        assert [(e.level, e.title) for e in result.outline] == [(0, "A")]

    def test_topic_without_section_is_top_level(self, agent, temp_dir):
        result = agent.process_text("## Only topic\n### X\n", temp_dir / "deck.pdf")
        assert [(e.level, e.title) for e in result.outline] == [(0, "Only topic")]


class TestRunningHeader:
    """Section and topic drawn on every slide page"""

    def page_texts(self, path):
        return [page.extract_text() for page in PdfReader(str(path)).pages]

    def test_section_change_resets_topic(self, agent, temp_dir):
        output = temp_dir / "deck.pdf"
        agent.process_text("# SecA\n## TopOne\n### X\nx\n# SecB\n### Y\ny\n", output)

        pages = self.page_texts(output)
        assert "SecA" in pages[1]
        assert "TopOne" in pages[1]
        assert "SecB" in pages[2]
        assert "TopOne" not in pages[2]

    def test_title_page_has_no_header(self, agent, temp_dir):
        output = temp_dir / "deck.pdf"
        agent.process_text("# SecA\n## TopOne\n### X\nx\n", output)
        assert "SecA" not in self.page_texts(output)[0]

    def test_overflow_pages_repeat_header(self, agent, temp_dir):
        output = temp_dir / "long.pdf"
        body = "\n\n".join(f"Paragraph {i} of a long slide." for i in range(40))
        result = agent.process_text(f"# S1\n### Long\n{body}\n", output)

        slide_pages = self.page_texts(output)[1:]
        assert result.page_count.total > 2
        assert all("S1" in text for text in slide_pages)


class TestAuthoredMarkup:
    """Inline emphasis the paragraph parser cannot nest"""

    @pytest.mark.parametrize("text", ["**a *b** c*", "*x **y* z**"])
    def test_overlapping_emphasis_renders(self, agent, temp_dir, text):
        output = temp_dir / "deck.pdf"
        result = agent.process_text(f"### S\n{text}\n", output)

        assert result.page_count.total == 2
        assert text in self.slide_text(output)

    def slide_text(self, path):
        return PdfReader(str(path)).pages[1].extract_text()


class TestPaginationEngine:
    """Phase ordering and failure handling"""

    @pytest.fixture
    def slides(self, sample_markdown):
        return DeckCompiler().compile(read_markdown(sample_markdown))

    def test_layout_pass_returns_page_count(self, resolved_style, slides):
        engine = PaginationEngine(DeckPDFRenderer(resolved_style), slides)
        assert engine.layout_pass() == PageCount(4)

    def test_render_pass_requires_page_count(self, resolved_style, slides, temp_dir):
        engine = PaginationEngine(DeckPDFRenderer(resolved_style), slides)
        with pytest.raises(TypeError):
            engine.render_pass(4, temp_dir / "deck.pdf")

    def test_page_count_mismatch(self, resolved_style, slides, temp_dir):
        output = temp_dir / "deck.pdf"
        engine = PaginationEngine(DeckPDFRenderer(resolved_style), slides)

        with pytest.raises(PaginationError) as exc_info:
            engine.render_pass(PageCount(5), output)

        assert exc_info.value.provisional == 5
        assert exc_info.value.final == 4
        assert not output.exists()
        assert list(temp_dir.iterdir()) == []

    def test_unknown_font_leaves_no_output(self, resolved_style, slides, temp_dir):
        output = temp_dir / "deck.pdf"
        broken = replace(resolved_style, text_font="NoSuchFont-Regular")
        engine = PaginationEngine(DeckPDFRenderer(broken), slides)

        with pytest.raises(LayoutError):
            engine.run(output)

        assert not output.exists()

    def test_unmeasurable_footer_leaves_no_output(self, resolved_style, slides, temp_dir):
        output = temp_dir / "deck.pdf"
        broken = replace(resolved_style, text_font="NoSuchFont-Regular")
        engine = PaginationEngine(DeckPDFRenderer(broken), slides)

        with pytest.raises(LayoutError):
            engine.render_pass(PageCount(4), output)

        assert list(temp_dir.iterdir()) == []

    def test_existing_output_replaced(self, resolved_style, slides, temp_dir):
        output = temp_dir / "deck.pdf"
        output.write_bytes(b"stale")
        PaginationEngine(DeckPDFRenderer(resolved_style), slides).run(output)
        assert output.read_bytes().startswith(b"%PDF")

    def test_result_to_dict(self, resolved_style, slides, temp_dir):
        result = PaginationEngine(DeckPDFRenderer(resolved_style), slides).run(temp_dir / "deck.pdf")
        data = result.to_dict()
        assert data["pages"] == 4
        assert data["outline"][0] == (0, "Introduction", 2)


class TestDeckConfigInPdf:

    def test_metadata(self, agent, sample_markdown, temp_dir):
        output = temp_dir / "deck.pdf"
        agent.process_text(sample_markdown, output)
        meta = PdfReader(str(output)).metadata
        assert meta.title == "Compilers in Practice"
        assert meta.author == "Jane Doe"

    def test_default_config_renders(self, sample_markdown, temp_dir):
        output = temp_dir / "deck.pdf"
        result = DeckAgent(DeckConfig()).process_text(sample_markdown, output)
        assert result.page_count.total == 4
        assert output.exists()
