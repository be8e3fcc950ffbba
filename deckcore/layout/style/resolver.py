#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Style Resolver

Normalizes "auto" and fallback configuration values into the concrete
values consumed by rendering.

Version: 1.0.0
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple
import logging

from reportlab.lib import colors
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from config.constants import (
    AUTO,
    CHROME_SIZE_RATIO,
    HEADING_SIZE_RATIO,
    MONO_SIZE_RATIO,
    PAGE_SIZES,
)
from deckcore.contracts import ConfigError
from .deck_config import DeckConfig

logger = logging.getLogger(__name__)

FONT_FILE_SUFFIXES = (".ttf", ".otf")


@dataclass(frozen=True)
class ResolvedStyle:
    """Concrete rendering values for one deck"""
    title: str
    subtitle: str
    short_title: str
    author: str
    short_author: str
    institute: str
    short_institute: str
    date: str

    color: colors.Color
    font_size: float
    text_font: str
    heading_font: str
    mono_font: str
    math_font: str
    heading_size: float
    mono_size: float
    chrome_size: float

    page_size: Tuple[float, float]

    @property
    def identity(self) -> str:
        """Footer identity text: short author and short institute"""
        return " · ".join(part for part in (self.short_author, self.short_institute) if part)

    @property
    def page_width(self) -> float:
        return self.page_size[0]

    @property
    def page_height(self) -> float:
        return self.page_size[1]


class StyleResolver:
    """
    Resolves a DeckConfig.

    Usage:
        style = StyleResolver().resolve(config)
    """

    def resolve(self, config: DeckConfig) -> ResolvedStyle:
        """
        Resolve configuration into concrete values.

        Args:
            config: Deck configuration

        Returns:
            ResolvedStyle

        Raises:
            ConfigError: colour or font cannot be resolved
        """
        font_size = config.font_size

        style = ResolvedStyle(
            title=config.title,
            subtitle=config.subtitle,
            short_title=self._fallback(config.short_title, config.title),
            author=config.author,
            short_author=self._fallback(config.short_author, config.author),
            institute=config.institute,
            short_institute=config.short_institute,
            date=config.date,
            color=self._resolve_color(config.color),
            font_size=font_size,
            text_font=self._resolve_font(config.text_font),
            heading_font=self._resolve_font(config.heading_font),
            mono_font=self._resolve_font(config.mono_font),
            math_font=self._resolve_font(config.math_font),
            heading_size=self._auto_size(config.heading_size, font_size, HEADING_SIZE_RATIO),
            mono_size=self._auto_size(config.mono_size, font_size, MONO_SIZE_RATIO),
            chrome_size=self._auto_size(config.chrome_size, font_size, CHROME_SIZE_RATIO),
            page_size=PAGE_SIZES[config.aspect_ratio],
        )

        logger.debug(f"Resolved style: {config.aspect_ratio}, {font_size}pt, fonts={style.text_font}/{style.heading_font}")
        return style

    @staticmethod
    def _fallback(value: str, default: str) -> str:
        return default if value == AUTO else value

    @staticmethod
    def _auto_size(value, font_size: float, ratio: float) -> float:
        if value == AUTO:
            return round(font_size * ratio, 2)
        return float(value)

    @staticmethod
    def _resolve_color(value: str) -> colors.Color:
        try:
            return colors.toColor(value)
        except ValueError as e:
            raise ConfigError(f"Invalid color: {value!r}") from e

    @staticmethod
    def _resolve_font(value: str) -> str:
        """Return a registered font name, registering TrueType files on the way"""
        path = Path(value)
        if path.suffix.lower() in FONT_FILE_SUFFIXES:
            name = path.stem
            if name not in pdfmetrics.getRegisteredFontNames():
                try:
                    pdfmetrics.registerFont(TTFont(name, str(path)))
                except Exception as e:
                    raise ConfigError(f"Cannot register font file {value}: {e}") from e
                logger.info(f"Registered font {name} from {path}")
            return name

        try:
            pdfmetrics.getFont(value)
        except Exception as e:
            raise ConfigError(f"Unknown font: {value!r}") from e
        return value
