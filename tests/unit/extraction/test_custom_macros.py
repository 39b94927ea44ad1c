"""Tests for md_macros.extraction.extractors.custom."""

import pytest

from md_macros.core.models import Macro
from md_macros.extraction.extractors.custom import CustomMacroExtractor, parse_macro


@pytest.mark.unit
class TestCustomMacroExtractor:
    def setup_method(self):
        self.extractor = CustomMacroExtractor()

    def test_no_args(self):
        macros = self.extractor.extract("[[sampleMacro]]")

        assert macros == [Macro(name="sampleMacro", args={}, full_match="[[sampleMacro]]")]

    def test_single_arg(self):
        text = '[[youtube url="test"]]'

        macros = self.extractor.extract(text)

        assert macros == [Macro(name="youtube", args={"url": "test"}, full_match=text)]

    def test_multi_line_args(self):
        text = '[[youtube\n\t\t\t\turl="test"\n\t\t\t\targ1="val1"\n\t\t\t]]'

        macros = self.extractor.extract(text)

        assert macros == [
            Macro(name="youtube", args={"url": "test", "arg1": "val1"}, full_match=text)
        ]

    def test_multiple_macros_in_order(self):
        first = '[[youtube url="test1"]]'
        second = '[[youtube\n\t\turl="test2"\n\t\targ1="val1"\n\t]]'
        md = f"\n\ttest string {first}\n\ttest string {second}\n"

        macros = self.extractor.extract(md)

        assert [m.full_match for m in macros] == [first, second]
        assert macros[0].args == {"url": "test1"}
        assert macros[1].args == {"url": "test2", "arg1": "val1"}

    def test_escaped_macro_skipped(self):
        macros = self.extractor.extract(r"\[[skipped]] and [[kept]]")

        assert [m.name for m in macros] == ["kept"]

    def test_empty_brackets_skipped(self):
        assert self.extractor.extract("Empty [[ ]] here") == []

    def test_name_split_on_newline(self):
        macros = self.extractor.extract('[[greeting\nname="User"]]')

        assert macros[0].name == "greeting"
        assert macros[0].args == {"name": "User"}

    def test_name_split_on_tab(self):
        macros = self.extractor.extract('[[greeting\tname="User"]]')

        assert macros[0].name == "greeting"
        assert macros[0].args == {"name": "User"}

    def test_name_split_before_spaced_value_on_next_line(self):
        macros = self.extractor.extract('[[greeting\nname="Dear User"]]')

        assert macros[0].name == "greeting"
        assert macros[0].args == {"name": "Dear User"}

    def test_values_with_spaces(self):
        macros = self.extractor.extract('[[greeting greeting="Hello there" name="User"]]')

        assert macros[0].args == {"greeting": "Hello there", "name": "User"}

    def test_nested_in_link_destination(self):
        macros = self.extractor.extract('[hello2]([[getLink test="what"]] "title")')

        assert macros == [
            Macro(name="getLink", args={"test": "what"}, full_match='[[getLink test="what"]]')
        ]

    def test_scan_is_lazy(self):
        scan = self.extractor.scan("[[a]] [[b]]")

        assert next(scan).name == "a"
        assert next(scan).name == "b"


@pytest.mark.unit
class TestParseMacro:
    def test_name_only(self):
        assert parse_macro("hello", "[[hello]]").args == {}

    def test_bare_words_do_not_become_args(self):
        macro = parse_macro('embed allowfullscreen src="x"', '[[embed allowfullscreen src="x"]]')

        assert macro.name == "embed"
        assert macro.args == {"src": "x"}
