"""Shorthand ``[text]`` self-reference extractor."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping

from md_macros.config.settings import SelfReferenceBoundaryPolicy
from md_macros.core.models import ParsedImage, ParsedLink, ReferenceDefinition
from md_macros.extraction.extractors.base import BaseExtractor
from md_macros.extraction.extractors.reference_style import build_reference_entity
from md_macros.parsing.boundaries import DocumentBoundaries

# Skips brackets that belong to macros, escapes, inline links, reference-style
# pairs and reference definitions.
_SELF_REFERENCE_RE = re.compile(
    r"(?<![\[\]\\])(?P<bang>!?)\[(?P<text>[^\[\]\n]+)\](?![(\[:\]])"
)

CHECKBOXES = frozenset({" ", "x", "X"})


class SelfReferenceExtractor(BaseExtractor[ParsedImage | ParsedLink]):
    """Finds bare ``[text]`` shorthand that names its own reference key."""

    def __init__(
        self,
        references: Mapping[str, ReferenceDefinition],
        boundaries: DocumentBoundaries,
        *,
        policy: SelfReferenceBoundaryPolicy = SelfReferenceBoundaryPolicy.LEGACY,
    ) -> None:
        self._references = references
        self._boundaries = boundaries
        self._policy = policy

    @property
    def name(self) -> str:
        return "self_reference"

    def scan(self, source: str) -> Iterator[ParsedImage | ParsedLink]:
        for match in _SELF_REFERENCE_RE.finditer(source):
            text = match.group("text")
            if text in CHECKBOXES:
                continue
            image = bool(match.group("bang"))
            if self._suppressed(match.start(), image):
                continue
            yield build_reference_entity(
                image=image,
                text=text,
                key=text,
                full_match=match.group(0),
                references=self._references,
            )

    def _suppressed(self, offset: int, image: bool) -> bool:
        if self._policy is SelfReferenceBoundaryPolicy.STRICT:
            return self._boundaries.contains(offset)
        if image:
            return False
        return self._boundaries.contains(offset, quotes=False)
