"""Per-kind entity scanners."""

from md_macros.extraction.extractors.base import BaseExtractor
from md_macros.extraction.extractors.custom import CustomMacroExtractor
from md_macros.extraction.extractors.inline import InlineLinkExtractor
from md_macros.extraction.extractors.reference_style import ReferenceStyleExtractor
from md_macros.extraction.extractors.references import ReferenceDefinitionExtractor
from md_macros.extraction.extractors.self_reference import SelfReferenceExtractor
from md_macros.extraction.extractors.tags import TagExtractor

__all__ = [
    "BaseExtractor",
    "CustomMacroExtractor",
    "InlineLinkExtractor",
    "ReferenceDefinitionExtractor",
    "ReferenceStyleExtractor",
    "SelfReferenceExtractor",
    "TagExtractor",
]
