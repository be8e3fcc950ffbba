"""
Style resolution: deck configuration -> concrete rendering values.
"""

from .deck_config import DeckConfig, load_deck_config
from .resolver import ResolvedStyle, StyleResolver

__all__ = [
    "DeckConfig",
    "load_deck_config",
    "ResolvedStyle",
    "StyleResolver",
]
