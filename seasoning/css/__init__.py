"""CSS reading and writing: stylesheet traversal, selector parsing and serialization."""

from .engine import EngineOutput, parse_stylesheet, transform_stylesheet
from .selectors import SelectorParseError, parse_selector, parse_selector_list
from .serialize import stringify_component, stringify_selector, stringify_selector_list

__all__ = [
    "EngineOutput",
    "SelectorParseError",
    "parse_selector",
    "parse_selector_list",
    "parse_stylesheet",
    "stringify_component",
    "stringify_selector",
    "stringify_selector_list",
    "transform_stylesheet",
]
