"""Tests for the parse / serialize_json / load_json entry points."""

import json

import pytest

from fluent_entries import load_json, parse, serialize_json
from fluent_entries.config import CodecConfig
from fluent_entries.errors import (
    InvalidDocumentError,
    MissingValueError,
    ParseError,
    UnexpectedValueTypeError,
    UnsupportedEntryError,
    UnsupportedExpressionError,
    UnsupportedPatternShapeError,
)
from fluent_entries.model import (
    EntityReference,
    Identifier,
    Message,
    Pattern,
    Placeable,
    Resource,
    Text,
)


# --- parse ---


def test_parse_empty():
    assert parse("") == Resource()


def test_parse_blank_lines_only():
    assert parse("\n\n   \n") == Resource()


def test_parse_minimal_message():
    resource = parse("foo = Bar")
    assert resource == Resource(
        entries=(Message(id="foo", value=Pattern(elements=(Text("Bar"),)), traits=None),)
    )


def test_parse_multiline_value():
    resource = parse("key =\n    First line\n    Second line\n")
    assert resource.get("key").value.text == "First line\nSecond line"


def test_parse_message_reference():
    resource = parse("app = Firefox\nwelcome = Welcome to { app }\n")
    assert resource.get("welcome").value.elements == (
        Text("Welcome to "),
        Placeable((EntityReference(Identifier("app")),)),
    )


def test_parse_term_reference():
    resource = parse("about = About { -brand }\n")
    placeable = resource.get("about").value.elements[1]
    assert placeable.expressions[0].id == Identifier("-brand")


def test_parse_syntax_error():
    text = "valid = Value\n\ninvalid\n"
    with pytest.raises(ParseError) as excinfo:
        parse(text)
    error = excinfo.value
    assert error.line == 3
    assert error.code.startswith("E")
    assert error.message
    assert error.junk is not None
    assert error.annotation is error.junk.annotations[0]


def test_parse_missing_value():
    with pytest.raises(MissingValueError) as excinfo:
        parse("foo =\n    .title = Title\n")
    assert excinfo.value.message_id == "foo"


def test_parse_term_unsupported():
    with pytest.raises(UnsupportedEntryError):
        parse("-brand = Firefox\n")


def test_parse_variable_unsupported():
    with pytest.raises(UnsupportedExpressionError):
        parse("hello = Hello { $name }\n")


# --- serialize_json ---


def test_serialize_minimal_message():
    assert json.loads(serialize_json(parse("foo = Bar"))) == {"foo": "Bar"}


def test_serialize_key_order():
    text = serialize_json(parse("zebra = Z\napple = A\nmango = M\n"))
    assert list(json.loads(text)) == ["zebra", "apple", "mango"]


def test_serialize_is_deterministic():
    resource = parse("b = B\na = A\n")
    assert serialize_json(resource) == serialize_json(resource)


def test_serialize_pretty_printed():
    text = serialize_json(parse("foo = Bar"))
    assert text == '{\n  "foo": "Bar"\n}'


def test_serialize_config():
    config = CodecConfig(indent=4, ensure_ascii=True, trailing_newline=True)
    text = serialize_json(parse("hi = Cześć"), config)
    assert text == '{\n    "hi": "Cze\\u015b\\u0107"\n}\n'


def test_serialize_keeps_unicode_by_default():
    assert "Cześć" in serialize_json(parse("hi = Cześć"))


def test_serialize_rejects_placeable():
    resource = parse("welcome = Welcome to { app }\n")
    with pytest.raises(UnsupportedPatternShapeError) as excinfo:
        serialize_json(resource)
    assert excinfo.value.message_id == "welcome"


# --- load_json ---


def test_load_json_order():
    resource = load_json('{"second": "2", "first": "1"}')
    assert resource.ids == ["second", "first"]


def test_load_json_round_trip():
    resource = parse("foo = Foo\nbar = Bar\n")
    assert load_json(serialize_json(resource)) == resource


def test_load_json_invalid():
    with pytest.raises(InvalidDocumentError) as excinfo:
        load_json("{not json")
    assert excinfo.value.message_id is None


def test_load_json_not_an_object():
    with pytest.raises(InvalidDocumentError) as excinfo:
        load_json('["foo", "bar"]')
    assert "array" in str(excinfo.value)


def test_load_json_non_string_value():
    with pytest.raises(UnexpectedValueTypeError) as excinfo:
        load_json('{"foo": {"value": "Bar"}}')
    assert excinfo.value.message_id == "foo"


def test_load_json_keeps_duplicate_ids():
    resource = load_json('{"a": "1", "b": "2", "a": "3"}')
    assert resource.ids == ["a", "b", "a"]
    assert resource == parse("a = 1\nb = 2\na = 3\n")


def test_load_json_nested_object_type():
    with pytest.raises(UnexpectedValueTypeError) as excinfo:
        load_json('{"ok": "fine", "foo": {"a": "1", "a": "2"}}')
    assert excinfo.value.json_type == "object"


def test_load_json_top_level_string():
    with pytest.raises(InvalidDocumentError) as excinfo:
        load_json('"just text"')
    assert "got string" in str(excinfo.value)
