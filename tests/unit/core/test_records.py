"""Tests for md_macros.core models and exceptions."""

import pytest
from pydantic import ValidationError

from md_macros.core.exceptions import (
    DuplicateReferenceKeyError,
    MacroParseError,
    MalformedTitleError,
)
from md_macros.core.models import (
    Boundary,
    Macro,
    ParsedLink,
    ParsedMacros,
    ParsedTag,
    ReferenceDefinition,
)


@pytest.mark.unit
class TestRecords:
    """Tests for the value records."""

    def test_link_defaults(self) -> None:
        link = ParsedLink(href="x", full_match="[a](x)")

        assert link.title == ""
        assert link.alt_text == ""
        assert link.is_reference_style is False
        assert link.reference_key is None

    def test_records_are_frozen(self) -> None:
        macro = Macro(name="m", full_match="[[m]]")

        with pytest.raises(ValidationError):
            macro.name = "other"

    def test_populate_by_alias(self) -> None:
        tag = ParsedTag(tag="a", fullMatch="#a", index=0, length=2)

        assert tag.full_match == "#a"

    def test_boundary_is_half_open(self) -> None:
        boundary = Boundary(index=5, length=3)

        assert boundary.end == 8
        assert not boundary.contains(4)
        assert boundary.contains(5)
        assert boundary.contains(7)
        assert not boundary.contains(8)


@pytest.mark.unit
class TestParsedMacros:
    """Tests for the aggregate result."""

    def test_empty(self) -> None:
        result = ParsedMacros()

        assert result.custom == []
        assert result.references == {}
        assert list(result.full_matches()) == []

    def test_to_dict_uses_camel_case(self) -> None:
        result = ParsedMacros(
            links=[ParsedLink(href="x", alt_text="a", full_match="[a](x)")],
            code_blocks=[Boundary(index=0, length=4)],
        )

        data = result.to_dict()

        assert set(data) == {
            "custom", "img", "links", "references", "tags", "codeBlocks", "quotes",
        }
        assert data["links"][0] == {
            "href": "x",
            "title": "",
            "altText": "a",
            "fullMatch": "[a](x)",
            "isReferenceStyle": False,
            "referenceKey": None,
        }
        assert data["codeBlocks"] == [{"index": 0, "length": 4}]

    def test_full_matches_in_pass_order(self) -> None:
        result = ParsedMacros(
            custom=[Macro(name="m", full_match="[[m]]")],
            links=[ParsedLink(href="x", full_match="[a](x)")],
            references={"k": ReferenceDefinition(value="v", full_match="[k]: v")},
            tags=[ParsedTag(tag="t", full_match="#t", index=0, length=2)],
        )

        assert list(result.full_matches()) == ["[[m]]", "[a](x)", "[k]: v", "#t"]


@pytest.mark.unit
class TestExceptions:
    """Tests for the error hierarchy."""

    def test_malformed_title_carries_title(self) -> None:
        error = MalformedTitleError("Title")

        assert isinstance(error, MacroParseError)
        assert error.title == "Title"
        assert error.details == {"title": "Title"}
        assert "Title" in str(error)

    def test_duplicate_key_carries_key(self) -> None:
        error = DuplicateReferenceKeyError("key")

        assert isinstance(error, MacroParseError)
        assert error.key == "key"
        assert "key" in error.message
