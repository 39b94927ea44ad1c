"""Inline ``![alt](src "title")`` and ``[text](href "title")`` extractor."""

from __future__ import annotations

import re
from collections.abc import Iterator

from md_macros.core.models import ParsedImage, ParsedLink
from md_macros.extraction.extractors.base import (
    BaseExtractor,
    normalize_title,
    split_first_whitespace,
)

_OPENING_RE = re.compile(r"(?P<bang>!?)\[(?P<alt>[^\[\]\n]*)\]\(")

MACRO_OPEN = "[["
MACRO_CLOSE = "]]"


class InlineLinkExtractor(BaseExtractor[ParsedImage | ParsedLink]):
    """Finds inline images and links.

    The destination may itself be a custom macro call, e.g.
    ``[label]([[getLink id="x"]] "Title")``.
    """

    @property
    def name(self) -> str:
        return "inline"

    def scan(self, source: str) -> Iterator[ParsedImage | ParsedLink]:
        resume = 0
        for match in _OPENING_RE.finditer(source):
            if match.start() < resume:
                continue
            close = find_closing_paren(source, match.end())
            if close == -1:
                continue
            resume = close + 1

            url, raw_title = split_destination(source[match.end() : close])
            title = normalize_title(raw_title)
            full_match = source[match.start() : resume]
            if match.group("bang"):
                yield ParsedImage(
                    src=url,
                    title=title,
                    alt_text=match.group("alt"),
                    full_match=full_match,
                )
            else:
                yield ParsedLink(
                    href=url,
                    title=title,
                    alt_text=match.group("alt"),
                    full_match=full_match,
                )


def find_closing_paren(source: str, start: int) -> int:
    """Return the offset of the ``)`` closing a destination, or -1.

    Nested ``[[...]]`` macros and double-quoted titles are skipped whole;
    a newline outside them ends the search.
    """
    position = start
    while position < len(source):
        char = source[position]
        if char == ")":
            return position
        if char == "\n":
            return -1
        if source.startswith(MACRO_OPEN, position):
            macro_close = source.find(MACRO_CLOSE, position)
            if macro_close == -1:
                return -1
            position = macro_close + len(MACRO_CLOSE)
            continue
        if char == '"':
            quote_close = source.find('"', position + 1)
            line_end = source.find("\n", position + 1)
            if quote_close != -1 and (line_end == -1 or quote_close < line_end):
                position = quote_close + 1
                continue
        position += 1
    return -1


def split_destination(body: str) -> tuple[str, str]:
    """Split a destination into its URL and raw title."""
    body = body.strip()
    if body.startswith(MACRO_OPEN):
        macro_close = body.find(MACRO_CLOSE)
        if macro_close != -1:
            url = body[: macro_close + len(MACRO_CLOSE)]
            rest = body[macro_close + len(MACRO_CLOSE) :]
            if not rest or rest[0].isspace():
                return url, rest.strip()
            tail, title = split_first_whitespace(rest)
            return url + tail, title
    return split_first_whitespace(body)
