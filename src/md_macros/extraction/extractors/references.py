"""Reference definition ``[key]: value "title"`` extractor."""

from __future__ import annotations

import re
from collections.abc import Iterator

from md_macros.core.exceptions import DuplicateReferenceKeyError
from md_macros.core.models import ReferenceDefinition
from md_macros.extraction.extractors.base import (
    BaseExtractor,
    normalize_title,
    split_first_whitespace,
)
from md_macros.parsing.boundaries import DocumentBoundaries

_DEFINITION_RE = re.compile(
    r"^[ \t]*(?P<full>\[(?P<key>[^\[\]\n]+)\]:[ \t]*(?P<rest>\S[^\n]*?))[ \t]*$",
    re.MULTILINE,
)


class ReferenceDefinitionExtractor(BaseExtractor[tuple[str, ReferenceDefinition]]):
    """Finds reference definitions outside code blocks and block quotes.

    Yields ``(key, definition)`` pairs and raises
    :class:`DuplicateReferenceKeyError` on the second definition of a key.
    """

    def __init__(self, boundaries: DocumentBoundaries) -> None:
        self._boundaries = boundaries

    @property
    def name(self) -> str:
        return "references"

    def scan(self, source: str) -> Iterator[tuple[str, ReferenceDefinition]]:
        seen: set[str] = set()
        for match in _DEFINITION_RE.finditer(source):
            if self._boundaries.contains(match.start("full")):
                continue

            key = match.group("key")
            value, raw_title = split_first_whitespace(match.group("rest"))
            definition = ReferenceDefinition(
                value=value,
                title=normalize_title(raw_title),
                full_match=match.group("full"),
            )
            if key in seen:
                raise DuplicateReferenceKeyError(key)
            seen.add(key)
            yield key, definition

    def collect(self, source: str) -> dict[str, ReferenceDefinition]:
        """Run the scan to completion and return the keyed mapping."""
        return dict(self.scan(source))
