"""JSON formatter for conversion tables."""

import json
from typing import Any

from seasoning.models.tables import ConversionTables


def _tables_to_dict(tables: ConversionTables) -> dict[str, Any]:
    """Convert ConversionTables to the persisted dictionary layout."""
    return {
        "selector": dict(tables.selector),
        "ident": dict(tables.ident),
    }


def format_tables_as_json(tables: ConversionTables, *, pretty: bool = True) -> str:
    """Format conversion tables as JSON.

    The output can be loaded again with ``load_conversion_tables`` or passed
    as ``conversion_tables`` to a later transform to keep names stable.

    Args:
        tables: The conversion tables to format
        pretty: If True, format with indentation for readability

    Returns:
        JSON-formatted string
    """
    data = _tables_to_dict(tables)

    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)
