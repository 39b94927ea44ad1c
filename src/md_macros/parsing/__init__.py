"""Document structure and attribute parsing."""

from md_macros.parsing.attributes import decode_attributes, normalize_attribute_text
from md_macros.parsing.boundaries import (
    BoundaryResolver,
    BoundarySet,
    DocumentBoundaries,
    resolve_boundaries,
)

__all__ = [
    "BoundaryResolver",
    "BoundarySet",
    "DocumentBoundaries",
    "decode_attributes",
    "normalize_attribute_text",
    "resolve_boundaries",
]
