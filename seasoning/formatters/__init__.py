"""Output formatters for seasoning results."""

from seasoning.formatters.json import format_tables_as_json

__all__ = ["format_tables_as_json"]
