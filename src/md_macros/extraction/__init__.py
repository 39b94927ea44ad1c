"""Entity extraction for md-macros."""

from md_macros.extraction.pipeline import ExtractionPipeline, parse_macros_from_md

__all__ = ["ExtractionPipeline", "parse_macros_from_md"]
