"""
Deck Configuration Model

Pydantic model of the per-deck configuration surface. Keys are accepted
in their authored dashed form (``short-title``) or as Python names.
"""

import json
from pathlib import Path
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from config.constants import (
    AUTO,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_COLOR,
    DEFAULT_FONT_SIZE,
    DEFAULT_HEADING_FONT,
    DEFAULT_MATH_FONT,
    DEFAULT_MONO_FONT,
    DEFAULT_TEXT_FONT,
)
from deckcore.contracts import ConfigError

AutoSize = Union[float, Literal["auto"]]


class DeckConfig(BaseModel):
    """Configuration of one deck"""
    title: str = ""
    subtitle: str = ""
    short_title: str = Field(default=AUTO, alias="short-title")
    author: str = ""
    short_author: str = Field(default=AUTO, alias="short-author")
    institute: str = ""
    short_institute: str = Field(default="", alias="short-institute")
    date: str = ""

    color: str = DEFAULT_COLOR
    font_size: float = Field(default=DEFAULT_FONT_SIZE, alias="font-size", gt=0)
    text_font: str = Field(default=DEFAULT_TEXT_FONT, alias="text-font")
    heading_font: str = Field(default=DEFAULT_HEADING_FONT, alias="heading-font")
    mono_font: str = Field(default=DEFAULT_MONO_FONT, alias="mono-font")
    math_font: str = Field(default=DEFAULT_MATH_FONT, alias="math-font")
    heading_size: AutoSize = Field(default=AUTO, alias="heading-size")
    mono_size: AutoSize = Field(default=AUTO, alias="mono-size")
    chrome_size: AutoSize = Field(default=AUTO, alias="chrome-size")

    aspect_ratio: Literal["16-9", "4-3"] = Field(default=DEFAULT_ASPECT_RATIO, alias="aspect-ratio")

    class Config:
        populate_by_name = True
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "title": "Compilers in Practice",
                "short-title": "Compilers",
                "author": "Jane Doe",
                "institute": "Example University",
                "date": "2026-10-18",
                "aspect-ratio": "16-9",
            }
        }

    @field_validator("heading_size", "mono_size", "chrome_size")
    @classmethod
    def _positive_size(cls, value):
        if value != AUTO and value <= 0:
            raise ValueError("size must be positive or 'auto'")
        return value

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeckConfig':
        """Validate a configuration dictionary"""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid deck configuration: {e}") from e

    def with_overrides(self, **overrides: Any) -> 'DeckConfig':
        """Return a copy with the non-None overrides applied and re-validated"""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return DeckConfig.from_dict(data)


def load_deck_config(path: Union[str, Path]) -> DeckConfig:
    """Load a deck configuration from a JSON file"""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read deck configuration {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Deck configuration {path} must be a JSON object")

    return DeckConfig.from_dict(data)
