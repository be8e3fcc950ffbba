#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Renderer Module

Chrome, title page and slide rendering on top of ReportLab.
"""

from .chrome import ChromeRenderer, FooterPlacement
from .title_page import TitlePageComposer
from .slide_story import SlideAnchor, SlideStoryBuilder
from .pdf_renderer import BuildStats, DeckDocTemplate, DeckPDFRenderer, OutlineEntry

__all__ = [
    "ChromeRenderer",
    "FooterPlacement",
    "TitlePageComposer",
    "SlideAnchor",
    "SlideStoryBuilder",
    "BuildStats",
    "DeckDocTemplate",
    "DeckPDFRenderer",
    "OutlineEntry",
]
