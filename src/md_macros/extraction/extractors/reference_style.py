"""Reference-style ``![alt][key]`` and ``[text][key]`` extractor."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping

from md_macros.core.models import ParsedImage, ParsedLink, ReferenceDefinition
from md_macros.extraction.extractors.base import BaseExtractor

_REFERENCE_STYLE_RE = re.compile(
    r"(?P<bang>!?)\[(?P<text>[^\[\]\n]*)\]\[(?P<key>[^\[\]\n]*)\]"
)


def build_reference_entity(
    *,
    image: bool,
    text: str,
    key: str,
    full_match: str,
    references: Mapping[str, ReferenceDefinition],
) -> ParsedImage | ParsedLink:
    """Resolve *key* against *references*; unknown keys give an empty target."""
    definition = references.get(key)
    target = definition.value if definition else ""
    title = definition.title if definition else ""
    if image:
        return ParsedImage(
            src=target,
            title=title,
            alt_text=text,
            full_match=full_match,
            is_reference_style=True,
            reference_key=key,
        )
    return ParsedLink(
        href=target,
        title=title,
        alt_text=text,
        full_match=full_match,
        is_reference_style=True,
        reference_key=key,
    )


class ReferenceStyleExtractor(BaseExtractor[ParsedImage | ParsedLink]):
    """Finds ``[text][key]`` forms and resolves them against known references."""

    def __init__(
        self,
        references: Mapping[str, ReferenceDefinition],
        *,
        collapsed_uses_text: bool = True,
    ) -> None:
        self._references = references
        self._collapsed_uses_text = collapsed_uses_text

    @property
    def name(self) -> str:
        return "reference_style"

    def scan(self, source: str) -> Iterator[ParsedImage | ParsedLink]:
        for match in _REFERENCE_STYLE_RE.finditer(source):
            text = match.group("text")
            key = match.group("key")
            if not key:
                if not self._collapsed_uses_text or not text:
                    continue
                key = text
            yield build_reference_entity(
                image=bool(match.group("bang")),
                text=text,
                key=key,
                full_match=match.group(0),
                references=self._references,
            )
