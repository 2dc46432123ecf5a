"""
Five-Card Draw Configuration.

Environment variables, settings, and logging configuration.
"""

from src.config.logging_setup import setup_logging
from src.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "setup_logging"]
