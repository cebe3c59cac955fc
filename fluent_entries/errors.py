"""Error taxonomy for parsing, adapting and encoding/decoding resources.

Every failure aborts production of the whole document. Adapter and codec
errors name the offending message id so a caller can pinpoint the entry.
"""

from __future__ import annotations

from typing import Any, Optional


class FluentEntriesError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(FluentEntriesError):
    """Invalid configuration file."""


class ParseError(FluentEntriesError):
    """The FTL parser rejected the source text.

    Built from the first annotation of the first Junk entry. The parser's
    own ``Annotation`` and ``Junk`` nodes are kept as-is on the exception.
    """

    def __init__(
        self,
        code: str,
        message: str,
        offset: int = 0,
        line: int = 1,
        column: int = 1,
        annotation: Any = None,
        junk: Any = None,
    ):
        self.code = code
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.annotation = annotation
        self.junk = junk
        super().__init__(f"{code}: {message} (line {line}, column {column})")


# --- Adapter ---


class AdapterError(FluentEntriesError):
    """The parsed tree has a shape the canonical model cannot hold."""

    def __init__(self, message_id: str, reason: str):
        self.message_id = message_id
        self.reason = reason
        super().__init__(f"Message '{message_id}': {reason}")


class MissingValueError(AdapterError):
    def __init__(self, message_id: str):
        super().__init__(message_id, "message has no value pattern")


class UnsupportedEntryError(AdapterError):
    def __init__(self, message_id: str, kind: str):
        self.kind = kind
        super().__init__(message_id, f"unsupported entry kind '{kind}'")


class UnsupportedExpressionError(AdapterError):
    def __init__(self, message_id: str, kind: str):
        self.kind = kind
        super().__init__(message_id, f"unsupported expression kind '{kind}'")


# --- Codec ---


class CodecError(FluentEntriesError):
    """A resource or document cannot cross the entries format boundary."""

    def __init__(self, message_id: Optional[str], reason: str):
        self.message_id = message_id
        self.reason = reason
        if message_id is None:
            super().__init__(reason)
        else:
            super().__init__(f"Message '{message_id}': {reason}")


class UnsupportedPatternShapeError(CodecError):
    """Encode side: the pattern is not a single text run."""


class UnexpectedValueTypeError(CodecError):
    """Decode side: the JSON value for a message is not a string."""

    def __init__(self, message_id: str, json_type: str):
        self.json_type = json_type
        super().__init__(message_id, f"expected a JSON string, got {json_type}")


class InvalidDocumentError(CodecError):
    """The entries document as a whole is malformed."""

    def __init__(self, reason: str):
        super().__init__(None, reason)
