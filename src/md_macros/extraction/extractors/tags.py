"""Hashtag extractor."""

from __future__ import annotations

import re
from collections.abc import Iterator

from md_macros.core.models import ParsedTag
from md_macros.extraction.extractors.base import BaseExtractor
from md_macros.parsing.boundaries import DocumentBoundaries

# ``#`` must open a line or follow whitespace; the token ends at whitespace,
# a comma, another ``#`` or a closing bracket.
_TAG_RE = re.compile(r"(?<!\S)#(?P<tag>[^\s,#\])]+)")
_NUMERIC_RE = re.compile(r"\d+")

TRAILING_PUNCTUATION = ".:"


class TagExtractor(BaseExtractor[ParsedTag]):
    """Finds ``#tag`` tokens outside code blocks and block quotes."""

    def __init__(self, boundaries: DocumentBoundaries) -> None:
        self._boundaries = boundaries

    @property
    def name(self) -> str:
        return "tags"

    def scan(self, source: str) -> Iterator[ParsedTag]:
        for match in _TAG_RE.finditer(source):
            tag = match.group("tag").rstrip(TRAILING_PUNCTUATION)
            if not tag or _NUMERIC_RE.fullmatch(tag):
                continue
            if self._boundaries.contains(match.start()):
                continue
            full_match = "#" + tag
            yield ParsedTag(
                tag=tag,
                full_match=full_match,
                index=match.start(),
                length=len(full_match),
            )
