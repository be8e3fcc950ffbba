#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Title Page Composer

Renders the opening page as three vertical groups (title, identity, date)
separated by spacer regions sized proportionally to the leftover height.
"""

from typing import Any, Dict, List

from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, Spacer

from config.constants import TITLE_PAGE_SPACER_WEIGHTS
from ..style.resolver import ResolvedStyle
from .markup import escape_text

# Keeps rounding from pushing the last group onto a second page
SLACK = 2.0


class TitlePageComposer:

    def __init__(self, style: ResolvedStyle, styles: Dict[str, ParagraphStyle]):
        self.style = style
        self.styles = styles

    def groups(self) -> List[List[Paragraph]]:
        """Title block, identity block, date block (possibly empty)"""
        s = self.style

        def para(text: str, style_name: str) -> List[Paragraph]:
            return [Paragraph(escape_text(text), self.styles[style_name])] if text else []

        return [
            para(s.title, "DeckTitle") + para(s.subtitle, "DeckSubtitle"),
            para(s.author, "DeckInfo") + para(s.institute, "DeckInfo"),
            para(s.date, "DeckInfo"),
        ]

    def compose(self, frame_width: float, frame_height: float) -> List[Any]:
        """
        Flowables filling exactly one frame.

        Args:
            frame_width: Usable frame width
            frame_height: Usable frame height

        Returns:
            Spacers and paragraphs for the title page
        """
        groups = self.groups()
        content_height = sum(
            p.wrap(frame_width, frame_height)[1]
            for group in groups
            for p in group
        )

        leftover = max(0.0, frame_height - content_height - SLACK)
        weights = TITLE_PAGE_SPACER_WEIGHTS
        unit = leftover / sum(weights)

        story: List[Any] = [Spacer(1, weights[0] * unit)]
        for group, weight in zip(groups, weights[1:]):
            story.extend(group)
            story.append(Spacer(1, weight * unit))

        return story
