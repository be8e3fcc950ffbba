"""
Deck compiler: block stream -> slide records.
"""

from .deck_compiler import DeckCompiler, CompilerState, OpenSlide, compile_blocks

__all__ = [
    "DeckCompiler",
    "CompilerState",
    "OpenSlide",
    "compile_blocks",
]
