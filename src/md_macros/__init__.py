"""md-macros: extract macros, images, links, references and tags from markdown."""

from md_macros.config import (
    SelfReferenceBoundaryPolicy,
    Settings,
    configure_logging,
    get_settings,
)
from md_macros.core import (
    Boundary,
    DuplicateReferenceKeyError,
    Macro,
    MacroParseError,
    MalformedTitleError,
    ParsedImage,
    ParsedLink,
    ParsedMacros,
    ParsedTag,
    ReferenceDefinition,
)
from md_macros.extraction import ExtractionPipeline, parse_macros_from_md

__version__ = "0.1.0"

__all__ = [
    "Boundary",
    "DuplicateReferenceKeyError",
    "ExtractionPipeline",
    "Macro",
    "MacroParseError",
    "MalformedTitleError",
    "ParsedImage",
    "ParsedLink",
    "ParsedMacros",
    "ParsedTag",
    "ReferenceDefinition",
    "SelfReferenceBoundaryPolicy",
    "Settings",
    "configure_logging",
    "get_settings",
    "parse_macros_from_md",
]
