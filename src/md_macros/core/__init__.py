"""Core models and exceptions for md-macros."""

from md_macros.core.exceptions import (
    DuplicateReferenceKeyError,
    MacroParseError,
    MalformedTitleError,
)
from md_macros.core.models import (
    Boundary,
    Macro,
    ParsedImage,
    ParsedLink,
    ParsedMacros,
    ParsedTag,
    ReferenceDefinition,
)

__all__ = [
    "Boundary",
    "DuplicateReferenceKeyError",
    "Macro",
    "MacroParseError",
    "MalformedTitleError",
    "ParsedImage",
    "ParsedLink",
    "ParsedMacros",
    "ParsedTag",
    "ReferenceDefinition",
]
