"""AST adapter — builds the canonical model from a parsed FTL resource.

The parsed tree comes from the ``fluent.syntax`` parser. Conversion is a
pure structural walk: nothing in the result points back into the tree.
"""

from __future__ import annotations

import logging

from fluent.syntax import ast

from fluent_entries.errors import (
    MissingValueError,
    UnsupportedEntryError,
    UnsupportedExpressionError,
)
from fluent_entries.model import (
    EntityReference,
    Entry,
    Expression,
    Identifier,
    Message,
    Pattern,
    PatternElement,
    Placeable,
    Resource,
    Text,
)

log = logging.getLogger("fluent_entries.adapter")


def convert(resource: ast.Resource) -> Resource:
    """Convert a ``fluent.syntax`` Resource into a canonical Resource.

    Comments are dropped. Any entry the model has no variant for raises an
    AdapterError naming it.
    """
    entries: list[Entry] = []
    skipped = 0

    for node in resource.body:
        if isinstance(node, ast.BaseComment):
            skipped += 1
            continue
        entries.append(_convert_entry(node))

    log.debug("Converted %d entries (%d comments skipped)", len(entries), skipped)
    return Resource(entries=tuple(entries))


def _convert_entry(node: ast.BaseNode) -> Entry:
    if isinstance(node, ast.Message):
        return _convert_message(node)
    if isinstance(node, ast.Term):
        raise UnsupportedEntryError(f"-{node.id.name}", "Term")
    if isinstance(node, ast.Junk):
        lines = (node.content or "").strip().splitlines()
        raise UnsupportedEntryError(lines[0] if lines else "", "Junk")
    raise UnsupportedEntryError("", type(node).__name__)


def _convert_message(node: ast.Message) -> Message:
    message_id = node.id.name
    if node.value is None:
        raise MissingValueError(message_id)

    # Attributes are not projected into traits yet.
    return Message(
        id=message_id,
        value=_convert_pattern(node.value, message_id),
        traits=None,
    )


def _convert_pattern(node: ast.Pattern, message_id: str) -> Pattern:
    return Pattern(
        elements=tuple(_convert_element(e, message_id) for e in node.elements)
    )


def _convert_element(node: ast.PatternElement, message_id: str) -> PatternElement:
    if isinstance(node, ast.TextElement):
        return Text(node.value)
    return Placeable(expressions=tuple(_convert_placeable(node, message_id)))


def _convert_placeable(node: ast.Placeable, message_id: str) -> list[Expression]:
    expression = node.expression
    # { { ref } } contributes the inner expressions
    if isinstance(expression, ast.Placeable):
        return _convert_placeable(expression, message_id)
    return [_convert_expression(expression, message_id)]


def _convert_expression(node: ast.Expression, message_id: str) -> Expression:
    if isinstance(node, ast.MessageReference):
        return EntityReference(_convert_identifier(node.id, node.attribute))
    if isinstance(node, ast.TermReference):
        return EntityReference(_convert_identifier(node.id, node.attribute, prefix="-"))
    raise UnsupportedExpressionError(message_id, type(node).__name__)


def _convert_identifier(
    node: ast.Identifier, attribute: ast.Identifier | None = None, prefix: str = ""
) -> Identifier:
    name = f"{prefix}{node.name}"
    if attribute is not None:
        name = f"{name}.{attribute.name}"
    return Identifier(name)
