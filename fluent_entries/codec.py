"""Ordered codec between the canonical model and the entries JSON format.

The entries format is one JSON object whose keys are message ids in
declaration order and whose values are the messages' text. Consumers rely
on that key order, so both directions work on insertion-ordered
associations and never sort.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Union

from fluent_entries.errors import (
    InvalidDocumentError,
    UnexpectedValueTypeError,
    UnsupportedPatternShapeError,
)
from fluent_entries.model import Message, Pattern, Placeable, Resource

log = logging.getLogger("fluent_entries.codec")


class JSONObject(list):
    """Key/value pairs of a decoded JSON object, in document order.

    Used as the ``object_pairs_hook`` so duplicate keys survive decoding.
    """


# Python type -> JSON type name, for decode errors
_JSON_TYPE_NAMES = {
    JSONObject: "object",
    dict: "object",
    list: "array",
    tuple: "array",
    bool: "boolean",
    int: "number",
    float: "number",
    str: "string",
    type(None): "null",
}

OrderedPairs = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


# --- Encode ---


def encode(resource: Resource) -> dict[str, str]:
    """Encode a resource as an ordered ``{id: text}`` association.

    Raises UnsupportedPatternShapeError for the first message whose value
    the entries format cannot represent.
    """
    result: dict[str, str] = {}
    for entry in resource.entries:
        if isinstance(entry, Message):
            if entry.id in result:
                log.warning("Duplicate message id '%s'; later value wins", entry.id)
            result[entry.id] = encode_pattern(entry.id, entry.value)
    return result


def encode_pattern(message_id: str, pattern: Pattern | None) -> str:
    """Return the text of a single-text pattern."""
    if pattern is None:
        raise UnsupportedPatternShapeError(message_id, "message has no value")
    if pattern.is_simple_text:
        return pattern.text
    raise UnsupportedPatternShapeError(message_id, _describe_shape(pattern))


def _describe_shape(pattern: Pattern) -> str:
    count = len(pattern.elements)
    if count == 0:
        return "pattern is empty"
    if any(isinstance(e, Placeable) for e in pattern.elements):
        return "pattern contains a placeable"
    return f"pattern has {count} elements, expected a single text run"


# --- Decode ---


def decode(obj: OrderedPairs) -> Resource:
    """Decode an entries association into a resource.

    Accepts a mapping or an iterable of ``(id, value)`` pairs; entries are
    produced in iteration order.
    """
    pairs = obj.items() if isinstance(obj, Mapping) else obj
    messages = []
    for key, value in pairs:
        if not isinstance(key, str):
            raise InvalidDocumentError(f"message id must be a string, got {key!r}")
        if not isinstance(value, str):
            raise UnexpectedValueTypeError(key, json_type_name(value))
        messages.append(Message(id=key, value=Pattern.from_text(value), traits=None))

    log.debug("Decoded %d messages", len(messages))
    return Resource(entries=tuple(messages))


def json_type_name(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)
