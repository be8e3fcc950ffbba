"""
Slide deck compiler.

    from deckcore import DeckAgent, DeckConfig

    DeckAgent(DeckConfig(title="Talk")).process("talk.md", "talk.pdf")
"""

from .compiler import DeckCompiler, compile_blocks
from .layout import DeckAgent, DeckConfig

__version__ = "1.0.0"

__all__ = [
    "DeckCompiler",
    "compile_blocks",
    "DeckAgent",
    "DeckConfig",
]
