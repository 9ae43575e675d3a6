"""Data models for selectors and conversion tables."""

from seasoning.models.selector import (
    AttributeComponent,
    ClassComponent,
    CombinatorComponent,
    IdComponent,
    NamespaceComponent,
    NestingComponent,
    PseudoClassComponent,
    PseudoElementComponent,
    Selector,
    SelectorComponent,
    TypeComponent,
    UniversalComponent,
)
from seasoning.models.naming import NamingMode
from seasoning.models.tables import ConversionTable, ConversionTables, TransformResult

__all__ = [
    "AttributeComponent",
    "ClassComponent",
    "CombinatorComponent",
    "ConversionTable",
    "ConversionTables",
    "IdComponent",
    "NamespaceComponent",
    "NamingMode",
    "NestingComponent",
    "PseudoClassComponent",
    "PseudoElementComponent",
    "Selector",
    "SelectorComponent",
    "TransformResult",
    "TypeComponent",
    "UniversalComponent",
]
