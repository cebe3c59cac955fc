"""Pipeline entry points: FTL text to resource, resource to entries JSON."""

from __future__ import annotations

import json
import logging

from fluent.syntax import FluentParser, ast

from fluent_entries.adapter import convert
from fluent_entries.codec import JSONObject, decode, encode, json_type_name
from fluent_entries.config import CodecConfig
from fluent_entries.errors import InvalidDocumentError, ParseError
from fluent_entries.model import Resource

log = logging.getLogger("fluent_entries.pipeline")


def parse(text: str) -> Resource:
    """Parse FTL source text into a canonical Resource.

    Raises ParseError if the parser produced any Junk, and AdapterError if
    the parsed tree does not fit the canonical model.
    """
    tree = FluentParser(with_spans=True).parse(text)

    for node in tree.body:
        if isinstance(node, ast.Junk):
            raise _parse_error(text, node)

    return convert(tree)


def serialize_json(resource: Resource, config: CodecConfig | None = None) -> str:
    """Pretty-print a resource as an entries JSON object, keys in declaration order."""
    config = config or CodecConfig()
    text = json.dumps(
        encode(resource),
        indent=config.indent,
        ensure_ascii=config.ensure_ascii,
    )
    if config.trailing_newline:
        text += "\n"
    return text


def load_json(text: str) -> Resource:
    """Decode entries JSON text into a canonical Resource.

    Duplicate ids are kept as separate entries, in document order.
    """
    try:
        data = json.loads(text, object_pairs_hook=JSONObject)
    except json.JSONDecodeError as e:
        raise InvalidDocumentError(f"Invalid JSON: {e}") from e

    if not isinstance(data, JSONObject):
        raise InvalidDocumentError(
            f"expected a JSON object at top level, got {json_type_name(data)}"
        )
    return decode(data)


def _parse_error(text: str, junk: ast.Junk) -> ParseError:
    if not junk.annotations:
        offset = junk.span.start if junk.span else 0
        line, column = _position(text, offset)
        return ParseError("E0001", "Generic error", offset, line, column, junk=junk)

    annotation = junk.annotations[0]
    offset = annotation.span.start if annotation.span else 0
    line, column = _position(text, offset)
    log.debug("Parse error %s at line %d: %s", annotation.code, line, annotation.message)
    return ParseError(
        annotation.code,
        annotation.message,
        offset,
        line,
        column,
        annotation=annotation,
        junk=junk,
    )


def _position(text: str, offset: int) -> tuple[int, int]:
    """1-based line and column of a character offset."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column
