"""Seeding, loading and saving of conversion tables."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from seasoning.formatters.json import format_tables_as_json
from seasoning.models.tables import ConversionTables

logger = logging.getLogger(__name__)

TablesInput = Union[ConversionTables, Mapping[str, Any], None]


class ConversionTableError(ValueError):
    """Raised when conversion table data is unreadable or malformed."""

    pass


def seed_tables(conversion_tables: TablesInput = None) -> ConversionTables:
    """Produce the tables a transform starts from.

    Args:
        conversion_tables: None for empty tables, an existing ConversionTables
            (used as is and grown in place), or a mapping with optional
            ``selector`` and ``ident`` entries

    Raises:
        ConversionTableError: If the mapping is not string-to-string tables
    """
    if conversion_tables is None:
        return ConversionTables()
    if isinstance(conversion_tables, ConversionTables):
        return conversion_tables
    if not isinstance(conversion_tables, Mapping):
        raise ConversionTableError(
            f"Conversion tables must be a mapping, got {type(conversion_tables).__name__}"
        )

    try:
        tables = ConversionTables.model_validate(dict(conversion_tables))
    except ValidationError as e:
        raise ConversionTableError(f"Invalid conversion tables: {e}") from e

    logger.debug(
        "Seeded %d selector and %d ident entries", len(tables.selector), len(tables.ident)
    )
    return tables


def load_conversion_tables(path: Path) -> ConversionTables:
    """Load conversion tables from a JSON file.

    Raises:
        ConversionTableError: If the file cannot be read or holds invalid tables
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConversionTableError(f"Failed to read conversion tables from {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConversionTableError(f"Conversion tables in {path} are not valid JSON: {e}") from e

    logger.info("Loaded conversion tables from %s", path)
    return seed_tables(data)


def save_conversion_tables(tables: ConversionTables, path: Path) -> None:
    """Write conversion tables to a JSON file."""
    path.write_text(format_tables_as_json(tables) + "\n", encoding="utf-8")
    logger.info("Saved %d table entries to %s", tables.size, path)
