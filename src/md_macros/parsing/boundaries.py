"""Code block and block quote boundaries.

The document is parsed once with mistune. Leaf literals are correlated back
to source offsets with a cursor that only moves forward, so repeated content
always resolves to its next occurrence rather than the first one in the file.
Other passes use the resulting :class:`DocumentBoundaries` to drop matches
that sit inside code or quoted text.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

import mistune

from md_macros.config.logging import get_logger
from md_macros.core.models import Boundary

logger = get_logger(__name__)

CODE_BLOCK = "block_code"
BLOCK_QUOTE = "block_quote"

# Token types whose ``raw`` field is literal source text.
LEAF_TYPES = frozenset({"text", "codespan", "block_code", "inline_html", "block_html"})


@dataclass(frozen=True)
class WalkEvent:
    """Entry or exit of one token during a depth-first walk."""

    token: dict[str, Any]
    entering: bool

    @property
    def kind(self) -> str:
        return self.token.get("type", "")

    @property
    def literal(self) -> str | None:
        if self.kind in LEAF_TYPES:
            return self.token.get("raw")
        return None


def walk(tokens: Iterable[dict[str, Any]]) -> Iterator[WalkEvent]:
    """Yield enter/exit events for *tokens* in document order."""
    for token in tokens:
        yield WalkEvent(token, entering=True)
        children = token.get("children")
        if children:
            yield from walk(children)
        yield WalkEvent(token, entering=False)


def parse_tokens(source: str) -> list[dict[str, Any]]:
    """Parse *source* into mistune's block/inline token tree."""
    markdown = mistune.create_markdown(renderer=None)
    tokens, _state = markdown.parse(source)
    return tokens


class BoundarySet:
    """Sorted, non-overlapping boundaries with binary-search containment."""

    def __init__(self, boundaries: Iterable[Boundary] = ()) -> None:
        self._boundaries = sorted(boundaries, key=lambda b: b.index)
        self._starts = [b.index for b in self._boundaries]

    def contains(self, offset: int) -> bool:
        """Return ``True`` if *offset* falls inside any boundary."""
        position = bisect.bisect_right(self._starts, offset) - 1
        return position >= 0 and self._boundaries[position].contains(offset)

    def as_list(self) -> list[Boundary]:
        return list(self._boundaries)

    def __iter__(self) -> Iterator[Boundary]:
        return iter(self._boundaries)

    def __len__(self) -> int:
        return len(self._boundaries)


@dataclass(frozen=True)
class DocumentBoundaries:
    """Code block and block quote ranges of one document."""

    code_blocks: BoundarySet
    quotes: BoundarySet

    def contains(self, offset: int, *, code: bool = True, quotes: bool = True) -> bool:
        if code and self.code_blocks.contains(offset):
            return True
        return quotes and self.quotes.contains(offset)


class BoundaryResolver:
    """Walks the token tree once and records boundary offsets.

    Construct one resolver per document; the cursor is not reset.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._cursor = 0
        self._quote_depth = 0
        self._quote_start = 0
        self._code_blocks: list[Boundary] = []
        self._quotes: list[Boundary] = []

    def resolve(self) -> DocumentBoundaries:
        for event in walk(parse_tokens(self._source)):
            if event.kind == BLOCK_QUOTE:
                self._on_quote(event.entering)
            elif event.entering and event.literal is not None:
                self._on_literal(event)

        logger.debug(
            "boundaries.resolved",
            code_blocks=len(self._code_blocks),
            quotes=len(self._quotes),
        )
        return DocumentBoundaries(
            code_blocks=BoundarySet(self._code_blocks),
            quotes=BoundarySet(self._quotes),
        )

    def _on_literal(self, event: WalkEvent) -> None:
        span = self._locate(event.literal or "")
        if span is None:
            return
        start, end = span
        self._cursor = end
        if event.kind == CODE_BLOCK:
            self._code_blocks.append(Boundary(index=start, length=end - start))

    def _on_quote(self, entering: bool) -> None:
        if entering:
            self._quote_depth += 1
            if self._quote_depth == 1:
                marker = self._source.find(">", self._cursor)
                self._quote_start = self._cursor if marker == -1 else marker
                self._cursor = self._quote_start
            return

        self._quote_depth -= 1
        if self._quote_depth == 0:
            end = self._quote_end(max(self._cursor, self._quote_start))
            self._quotes.append(
                Boundary(index=self._quote_start, length=end - self._quote_start)
            )
            self._cursor = end

    def _locate(self, literal: str) -> tuple[int, int] | None:
        """Find *literal* at or after the cursor.

        Falls back to matching the first and last non-blank lines when the
        source carries line prefixes the parser stripped (indentation, ``>``).
        """
        if not literal:
            return None
        start = self._source.find(literal, self._cursor)
        if start != -1:
            return start, start + len(literal)

        lines = [line.strip() for line in literal.splitlines() if line.strip()]
        if not lines:
            return None
        start = self._source.find(lines[0], self._cursor)
        if start == -1:
            return None
        if len(lines) == 1:
            return start, start + len(lines[0])
        last = self._source.find(lines[-1], start + len(lines[0]))
        if last == -1:
            return None
        return start, last + len(lines[-1])

    def _quote_end(self, end: int) -> int:
        # Reference definitions never become tokens, so trailing ``>`` lines
        # are claimed from the source directly.
        source = self._source
        if end > 0 and source[end - 1] != "\n":
            newline = source.find("\n", end)
            end = len(source) if newline == -1 else newline + 1
        while end < len(source):
            newline = source.find("\n", end)
            line_end = len(source) if newline == -1 else newline + 1
            if not source[end:line_end].lstrip().startswith(">"):
                break
            end = line_end
        return end


def resolve_boundaries(source: str) -> DocumentBoundaries:
    """Return the code block and block quote boundaries of *source*."""
    return BoundaryResolver(source).resolve()
