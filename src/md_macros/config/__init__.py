"""Configuration module for md-macros."""

from md_macros.config.logging import configure_logging, ensure_logging, get_logger
from md_macros.config.settings import (
    SelfReferenceBoundaryPolicy,
    Settings,
    get_settings,
)

__all__ = [
    "SelfReferenceBoundaryPolicy",
    "Settings",
    "configure_logging",
    "ensure_logging",
    "get_logger",
    "get_settings",
]
