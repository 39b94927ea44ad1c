"""Value records produced by a single parse call.

Every record is a frozen pydantic model. Field names are snake_case in
Python and serialize to the camelCase names downstream renderers expect
(``fullMatch``, ``altText``, ``isReferenceStyle`` ...).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Macro(_Record):
    """A ``[[name arg="val" ...]]`` directive."""

    name: str
    args: dict[str, str] = Field(default_factory=dict)
    full_match: str


class ParsedImage(_Record):
    """An inline ``![alt](src "title")`` or reference-style ``![alt][key]`` image."""

    src: str
    title: str = ""
    alt_text: str = ""
    full_match: str
    is_reference_style: bool = False
    reference_key: str | None = None


class ParsedLink(_Record):
    """An inline ``[text](href "title")`` or reference-style ``[text][key]`` link."""

    href: str
    title: str = ""
    alt_text: str = ""
    full_match: str
    is_reference_style: bool = False
    reference_key: str | None = None


class ReferenceDefinition(_Record):
    """A ``[key]: value "title"`` definition. The key lives in the mapping."""

    value: str
    title: str = ""
    full_match: str


class ParsedTag(_Record):
    """A ``#tag`` with its position in the source document."""

    tag: str
    full_match: str
    index: int
    length: int


class Boundary(_Record):
    """Source range covered by a code block or block quote."""

    index: int
    length: int

    @property
    def end(self) -> int:
        return self.index + self.length

    def contains(self, offset: int) -> bool:
        return self.index <= offset < self.end


class ParsedMacros(_Record):
    """Aggregate result of one :func:`parse_macros_from_md` call."""

    custom: list[Macro] = Field(default_factory=list)
    img: list[ParsedImage] = Field(default_factory=list)
    links: list[ParsedLink] = Field(default_factory=list)
    references: dict[str, ReferenceDefinition] = Field(default_factory=dict)
    tags: list[ParsedTag] = Field(default_factory=list)
    code_blocks: list[Boundary] = Field(default_factory=list)
    quotes: list[Boundary] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping consumed by substitution stages."""
        return self.model_dump(by_alias=True)

    def full_matches(self) -> Iterator[str]:
        """Yield every entity's ``full_match`` in pass order."""
        for macro in self.custom:
            yield macro.full_match
        for image in self.img:
            yield image.full_match
        for link in self.links:
            yield link.full_match
        for reference in self.references.values():
            yield reference.full_match
        for tag in self.tags:
            yield tag.full_match
