"""
Unit Tests for the Deck Compiler

Covers slide segmentation, the header snapshot and outline bookmark
deduplication.
"""

import logging

from deckcore.compiler import DeckCompiler, CompilerState, OpenSlide, compile_blocks
from deckcore.contracts import (
    CompiledDeck,
    Content,
    ContentKind,
    SectionMarker,
    SlideMarker,
    SubheadingMarker,
    TopicMarker,
)


class TestSegmentation:
    """Slide boundaries and body attribution."""

    def test_empty_stream(self):
        assert compile_blocks([]) == []

    def test_no_slide_markers(self):
        blocks = [
            SectionMarker("A"),
            TopicMarker("1"),
            Content("orphan"),
            SubheadingMarker("sub"),
        ]
        assert compile_blocks(blocks) == []

    def test_one_record_per_slide_marker(self, sample_blocks):
        slides = compile_blocks(sample_blocks)
        markers = [b for b in sample_blocks if isinstance(b, SlideMarker)]
        assert len(slides) == len(markers)
        assert [s.title for s in slides] == [m.title for m in markers]

    def test_consecutive_slide_markers_keep_empty_slide(self):
        slides = compile_blocks([SlideMarker("X"), SlideMarker("Y")])
        assert [s.title for s in slides] == ["X", "Y"]
        assert slides[0].body == ()
        assert slides[1].body == ()

    def test_leading_content_dropped(self):
        content, content2 = Content("before"), Content("after")
        slides = compile_blocks([content, SlideMarker("X"), content2])
        assert len(slides) == 1
        assert slides[0].body == (content2,)

    def test_subheadings_are_body_content(self):
        sub = SubheadingMarker("Detail")
        text = Content("text")
        slides = compile_blocks([SlideMarker("X"), sub, text])
        assert slides[0].body == (sub, text)

    def test_last_slide_finalized_at_end_of_stream(self):
        slides = compile_blocks([SlideMarker("X"), Content("a"), Content("b")])
        assert len(slides[0].body) == 2

    def test_body_preserves_order(self, sample_blocks):
        slides = compile_blocks(sample_blocks)
        first = slides[0]
        assert [b.text for b in first.body] == [
            "Authors write a flat stream.",
            "Goal",
            "Infer slide boundaries",
        ]


class TestHeaderSnapshot:
    """Section/topic are fixed when a slide opens."""

    def test_snapshot_property(self):
        content = Content("c")
        slides = compile_blocks([
            SectionMarker("A"),
            SlideMarker("X"),
            SectionMarker("B"),
            content,
            SlideMarker("Y"),
        ])
        x, y = slides
        assert x.section == "A"
        assert y.section == "B"
        # Content after a section marker still belongs to the open slide
        assert x.body == (content,)
        assert y.body == ()

    def test_section_resets_topic(self):
        slides = compile_blocks([
            SectionMarker("A"),
            TopicMarker("1"),
            SlideMarker("X"),
            SectionMarker("B"),
            SlideMarker("Y"),
        ])
        assert slides[0].topic == "1"
        assert slides[1].section == "B"
        assert slides[1].topic == ""

    def test_topic_without_section(self):
        slides = compile_blocks([TopicMarker("T"), SlideMarker("X")])
        assert slides[0].section == ""
        assert slides[0].topic == "T"

    def test_trailing_markers_absorbed(self):
        slides = compile_blocks([
            SectionMarker("A"),
            SlideMarker("X"),
            SectionMarker("Never used"),
            TopicMarker("Never used either"),
        ])
        assert len(slides) == 1
        assert slides[0].section == "A"


class TestOutlineDedup:
    """Outline directives are emitted once per distinct transition."""

    def test_same_section_and_topic(self):
        x, y = compile_blocks([
            SectionMarker("A"),
            TopicMarker("1"),
            SlideMarker("X"),
            SlideMarker("Y"),
        ])
        assert x.outline_section == "A"
        assert x.outline_topic == "1"
        assert y.outline_section is None
        assert y.outline_topic is None

    def test_section_change_forces_topic_rebookmark(self):
        x, y = compile_blocks([
            SectionMarker("A"),
            TopicMarker("1"),
            SlideMarker("X"),
            SectionMarker("B"),
            TopicMarker("1"),
            SlideMarker("Y"),
        ])
        assert x.outline_topic == "1"
        assert y.outline_section == "B"
        assert y.outline_topic == "1"

    def test_topic_change_within_section(self):
        x, y = compile_blocks([
            SectionMarker("A"),
            TopicMarker("1"),
            SlideMarker("X"),
            TopicMarker("2"),
            SlideMarker("Y"),
        ])
        assert y.outline_section is None
        assert y.outline_topic == "2"

    def test_redeclared_identical_section_is_not_rebookmarked(self):
        x, y = compile_blocks([
            SectionMarker("A"),
            SlideMarker("X"),
            SectionMarker("A"),
            SlideMarker("Y"),
        ])
        assert x.outline_section == "A"
        assert y.outline_section is None
        # Topic was reset to "" and was already bookmarked as ""
        assert y.outline_topic is None

    def test_first_slide_bookmarks_empty_values(self):
        """Unset differs from empty: the very first slide always bookmarks."""
        (x,) = compile_blocks([SlideMarker("X")])
        assert x.outline_section == ""
        assert x.outline_topic == ""

    def test_outline_listing(self, sample_blocks):
        deck = DeckCompiler().compile_deck(sample_blocks)
        assert deck.outline() == [
            (0, "Introduction"),
            (1, "Motivation"),
            (0, "Design"),
            (1, "Segmentation"),
        ]


class TestCompilerState:
    """Direct tests of the finalize step."""

    def test_finalize_updates_bookmarks(self):
        state = CompilerState(open_slide=OpenSlide(title="X", section="A", topic="1"))
        record = state.finalize()
        assert record.outline_section == "A"
        assert record.outline_topic == "1"
        assert state.last_bookmarked_section == "A"
        assert state.last_bookmarked_topic == "1"
        assert state.open_slide is None

    def test_finalize_freezes_body(self):
        state = CompilerState(open_slide=OpenSlide(title="X", section="", topic=""))
        state.open_slide.body.append(Content("a"))
        record = state.finalize()
        assert record.body == (Content("a"),)


class TestCompiledDeck:
    """Compiler output contract."""

    def test_dropped_blocks_counted(self):
        deck = DeckCompiler().compile_deck([
            Content("a"),
            SubheadingMarker("b"),
            SlideMarker("X"),
        ])
        assert deck.dropped_blocks == 2
        assert deck.slide_count == 1

    def test_dropped_content_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="deckcore.compiler.deck_compiler"):
            DeckCompiler().compile_deck([Content("a"), SlideMarker("X")])
        assert "before the first slide" in caplog.text

    def test_dropped_content_warning_disabled(self, caplog):
        with caplog.at_level(logging.WARNING, logger="deckcore.compiler.deck_compiler"):
            DeckCompiler(warn_dropped_content=False).compile_deck([Content("a"), SlideMarker("X")])
        assert "before the first slide" not in caplog.text

    def test_compiled_deck_is_valid(self, sample_blocks):
        deck = DeckCompiler().compile_deck(sample_blocks)
        assert deck.validate() == []
        deck.assert_valid()

    def test_json_round_trip(self, sample_blocks):
        deck = DeckCompiler().compile_deck(sample_blocks)
        restored = CompiledDeck.from_json(deck.to_json())
        assert restored.slides == deck.slides
        assert restored.dropped_blocks == deck.dropped_blocks

    def test_code_content_kind_survives_serialization(self):
        deck = DeckCompiler().compile_deck([SlideMarker("X"), Content("x = 1", ContentKind.CODE)])
        restored = CompiledDeck.from_dict(deck.to_dict())
        assert restored.slides[0].body[0].content_kind is ContentKind.CODE
