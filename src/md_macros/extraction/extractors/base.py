"""Base scanner implementation and shared title handling."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

from md_macros.core.exceptions import MalformedTitleError

T = TypeVar("T")


class BaseExtractor(ABC, Generic[T]):
    """Base class for the per-kind scanners.

    Scanners are constructed fresh for every parse call and hold only
    read-only inputs from earlier passes.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The name of this extractor."""
        ...

    @abstractmethod
    def scan(self, source: str) -> Iterator[T]:
        """Lazily yield entities from *source* in document order."""
        ...

    def extract(self, source: str) -> list[T]:
        return list(self.scan(source))


def split_first_whitespace(text: str) -> tuple[str, str]:
    """Split *text* into its first token and the stripped remainder."""
    parts = text.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def normalize_title(raw: str) -> str:
    """Strip the surrounding double quotes from a title.

    An empty title stays empty. Anything else that is not double-quoted
    raises :class:`MalformedTitleError`.
    """
    raw = raw.strip()
    if not raw:
        return ""
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return raw[1:-1]
    raise MalformedTitleError(raw)
