"""
Pytest configuration and shared fixtures for slide deck compiler tests.
"""
import sys
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from deckcore.contracts import (
    Content,
    ContentKind,
    SectionMarker,
    SlideMarker,
    SubheadingMarker,
    TopicMarker,
)
from deckcore.layout import DeckConfig, StyleResolver
from config.settings import Settings


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture
def test_settings(temp_dir: Path):
    """Settings writing into a temporary directory."""
    return Settings(
        output_dir=temp_dir / "output",
        logs_dir=temp_dir / "logs",
        warn_dropped_content=True,
    )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def deck_config() -> DeckConfig:
    """A fully populated deck configuration."""
    return DeckConfig.from_dict({
        "title": "Compilers in Practice",
        "subtitle": "From tokens to slides",
        "short-title": "Compilers",
        "author": "Jane Doe",
        "institute": "Example University",
        "short-institute": "EU",
        "date": "2026-10-18",
        "aspect-ratio": "16-9",
    })


@pytest.fixture
def resolved_style(deck_config):
    """Resolved style for the populated deck configuration."""
    return StyleResolver().resolve(deck_config)


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

@pytest.fixture
def sample_blocks():
    """A small deck with two sections, topics and a subheading."""
    return [
        SectionMarker("Introduction"),
        TopicMarker("Motivation"),
        SlideMarker("Why compile slides?"),
        Content("Authors write a flat stream."),
        SubheadingMarker("Goal"),
        Content("Infer slide boundaries", ContentKind.BULLET),
        SlideMarker("Running state"),
        Content("Section and topic carry over."),
        SectionMarker("Design"),
        TopicMarker("Segmentation"),
        SlideMarker("State machine"),
        Content("x = 1", ContentKind.CODE),
    ]


@pytest.fixture
def sample_markdown():
    """Authored markdown matching sample_blocks in structure."""
    return (
        "# Introduction\n"
        "## Motivation\n"
        "### Why compile slides?\n"
        "Authors write a flat stream.\n"
        "\n"
        "#### Goal\n"
        "- Infer slide boundaries\n"
        "### Running state\n"
        "Section and topic carry over.\n"
        "# Design\n"
        "## Segmentation\n"
        "### State machine\n"
        "```\n"
        "x = 1\n"
        "```\n"
    )


@pytest.fixture
def make_deck_markdown():
    """Factory: markdown with one section and N one-line slides."""
    def factory(slide_count: int) -> str:
        lines = ["# Part", "## Topic"]
        for i in range(1, slide_count + 1):
            lines.append(f"### Slide {i}")
            lines.append(f"Body of slide {i}.")
        return "\n".join(lines) + "\n"
    return factory


@pytest.fixture
def markdown_file(temp_dir: Path, sample_markdown: str) -> Path:
    """sample_markdown written to disk."""
    path = temp_dir / "talk.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
