"""
Configuration module for the slide deck compiler.
"""
from .constants import *
from .logging_config import setup_logger, LOGGER_NAME
from .settings import Settings

__all__ = [
    # Logging
    'setup_logger',
    'LOGGER_NAME',
    # Settings
    'Settings',
    # Constants (all exported via *)
]
