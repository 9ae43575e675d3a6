"""Rename CSS classes, ids and custom properties to short or obfuscated names."""

from seasoning.models import ConversionTables, NamingMode, TransformResult
from seasoning.pipeline.tables import ConversionTableError, load_conversion_tables, save_conversion_tables
from seasoning.pipeline.transformer import transform

__all__ = [
    "ConversionTableError",
    "ConversionTables",
    "NamingMode",
    "TransformResult",
    "load_conversion_tables",
    "save_conversion_tables",
    "transform",
]
