"""Bridge between parsed Fluent (FTL) resources and the "entries" JSON format.

The entries format is a flat JSON object mapping message ids to their text,
in declaration order. This package provides:
- A canonical resource model (fluent_entries.model)
- An adapter from the fluent.syntax AST to that model
- An ordered codec between the model and entries JSON
"""

__version__ = "0.1.0"

from fluent_entries.pipeline import load_json, parse, serialize_json  # noqa: E402

__all__ = ["__version__", "load_json", "parse", "serialize_json"]
