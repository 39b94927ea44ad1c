"""Custom ``[[name arg="val"]]`` macro extractor."""

from __future__ import annotations

import re
from collections.abc import Iterator

from md_macros.core.models import Macro
from md_macros.extraction.extractors.base import BaseExtractor
from md_macros.parsing.attributes import decode_attributes, normalize_attribute_text

# A leading backslash escapes the macro; the body may span lines.
_MACRO_RE = re.compile(r"(?P<escape>\\)?(?P<macro>\[\[(?P<body>[^\]]+)\]\])")
_WHITESPACE_RE = re.compile(r"\s")


class CustomMacroExtractor(BaseExtractor[Macro]):
    """Finds ``[[...]]`` spans and decodes their arguments."""

    @property
    def name(self) -> str:
        return "custom"

    def scan(self, source: str) -> Iterator[Macro]:
        for match in _MACRO_RE.finditer(source):
            if match.group("escape"):
                continue
            body = match.group("body").strip()
            if not body:
                continue
            yield parse_macro(body, match.group("macro"))


def parse_macro(body: str, full_match: str) -> Macro:
    """Build a :class:`Macro` from the trimmed text between the brackets."""
    separator = _WHITESPACE_RE.search(body)
    if separator is None:
        return Macro(name=body, args={}, full_match=full_match)

    name = body[: separator.start()].strip()
    args = decode_attributes(normalize_attribute_text(body[separator.end() :]))
    return Macro(name=name, args=args, full_match=full_match)
