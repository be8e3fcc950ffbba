#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from pydantic_settings import BaseSettings

from .constants import DEFAULT_ASPECT_RATIO, LOG_LEVEL


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings, read from SLIDEDECK_* environment variables or .env"""

    # ========== Output ==========
    output_dir: Path = BASE_DIR / "data" / "output"
    logs_dir: Path = BASE_DIR / "data" / "logs"

    # ========== Logging ==========
    log_level: str = LOG_LEVEL

    # ========== Deck Defaults ==========
    default_aspect_ratio: str = DEFAULT_ASPECT_RATIO  # 16-9 | 4-3

    # Content authored before the first slide is dropped; warn about it
    warn_dropped_content: bool = True

    class Config:
        env_prefix = "SLIDEDECK_"
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    def ensure_dirs(self) -> None:
        """Create output and log directories"""
        for dir_path in [self.output_dir, self.logs_dir]:
            dir_path.mkdir(exist_ok=True, parents=True)

    @property
    def log_file(self) -> Path:
        return self.logs_dir / "slidedeck.log"
