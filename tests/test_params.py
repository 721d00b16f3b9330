"""Tests for parameter parsing and default value rendering."""

import pytest
from jsinterop.models import DocumentationBlock, ParameterDescriptor
from jsinterop.params import parse_parameter, parse_parameters, render_default


class TestParseParameter:
    def test_plain_name(self):
        param = parse_parameter("value")
        assert param == ParameterDescriptor(name="value", type="object")

    def test_optional_with_type(self):
        """count?: number -> optional double with no default."""
        param = parse_parameter("count?: number")
        assert param.name == "count"
        assert param.type == "double"
        assert param.is_optional is True
        assert param.default_value is None

    def test_optional_without_type(self):
        param = parse_parameter("label?")
        assert param.name == "label"
        assert param.type == "object"
        assert param.is_optional is True

    def test_default_value(self):
        param = parse_parameter("retries = 3")
        assert param.name == "retries"
        assert param.default_value == "3"
        assert param.is_optional is True

    def test_default_value_with_type(self):
        param = parse_parameter("flag: boolean = false")
        assert param.name == "flag"
        assert param.type == "bool"
        assert param.default_value == "false"
        assert param.is_optional is True

    def test_default_string_containing_separators(self):
        """Only the first = splits; a : in the default is not a type."""
        param = parse_parameter("url = 'http://x?a=b'")
        assert param.name == "url"
        assert param.type == "object"
        assert param.default_value == "'http://x?a=b'"

    def test_inline_type(self):
        param = parse_parameter(" name : string ")
        assert param.name == "name"
        assert param.type == "string"
        assert param.is_optional is False

    def test_doc_type_used_without_annotation(self):
        doc = DocumentationBlock(parameter_types={"items": "Array"})
        assert parse_parameter("items", doc).type == "object[]"

    def test_inline_type_wins_over_doc(self):
        doc = DocumentationBlock(parameter_types={"n": "string"})
        assert parse_parameter("n: number", doc).type == "double"

    def test_doc_type_for_defaulted_param(self):
        doc = DocumentationBlock(parameter_types={"size": "number"})
        param = parse_parameter("size = 10", doc)
        assert param.type == "double"
        assert param.default_value == "10"

    def test_unknown_doc_type(self):
        doc = DocumentationBlock(parameter_types={"el": "HTMLElement"})
        assert parse_parameter("el", doc).type == "object"


class TestParseParameters:
    def test_empty(self):
        assert parse_parameters("") == []
        assert parse_parameters("   \n ") == []

    def test_order_is_preserved(self):
        params = parse_parameters("c, a, b")
        assert [p.name for p in params] == ["c", "a", "b"]

    def test_empty_segments_are_skipped(self):
        params = parse_parameters("a, , b,")
        assert [p.name for p in params] == ["a", "b"]

    def test_multiline_list(self):
        params = parse_parameters("\n  first: string,\n  second?: number\n")
        assert [(p.name, p.type, p.is_optional) for p in params] == [
            ("first", "string", False),
            ("second", "double", True),
        ]


class TestParameterDescriptor:
    def test_default_requires_optional(self):
        with pytest.raises(ValueError, match="not optional"):
            ParameterDescriptor(name="x", default_value="1", is_optional=False)

    def test_immutable(self):
        param = ParameterDescriptor(name="x")
        with pytest.raises(AttributeError):
            param.name = "y"


class TestRenderDefault:
    @pytest.mark.parametrize(
        "js,expected",
        [
            ("true", "true"),
            ("false", "false"),
            ("null", "null"),
            ("undefined", "null"),
            ("42", "42"),
            ("-1.5", "-1.5"),
            ("1e3", "1e3"),
            ("'hello'", '"hello"'),
            ('"hello"', '"hello"'),
            ("'say \"hi\"'", '"say \\"hi\\""'),
            ("[]", "null"),
            ("{}", "null"),
            ("someCall", "null"),
        ],
    )
    def test_literals(self, js, expected):
        assert render_default(js) == expected
