"""Selector tree walker: renames class and id tokens inside selectors.

The walker never mutates the selector it is given. Each component maps to a
list of alternatives (usually exactly one component sequence), and the
alternatives of all components are combined into the resulting selectors.
A single class or id can therefore be replaced by a whole compound or
complex selector when the selector table says so.
"""

import logging
from typing import Callable, Optional, Union

from seasoning.css.selectors import parse_selector_list
from seasoning.models.selector import (
    NTH_PSEUDO_CLASSES,
    SELECTOR_LIST_PSEUDO_CLASSES,
    ClassComponent,
    IdComponent,
    PseudoClassComponent,
    Selector,
    SelectorComponent,
)
from seasoning.models.tables import ConversionTable
from seasoning.pipeline.escape import css_escape, css_unescape
from seasoning.pipeline.naming import NamingStrategy

logger = logging.getLogger(__name__)

CLASS_SIGIL = "."
ID_SIGIL = "#"

PASS_THROUGH_TYPES = frozenset(
    {"type", "universal", "attribute", "combinator", "namespace", "nesting", "pseudo-element"}
)


class SelectorStringifyError(ValueError):
    """Raised when a renameable component has no textual form."""

    def __init__(self, component: SelectorComponent):
        self.component = component
        super().__init__(
            f"Unhandled component stringify: {component!r}, "
            f"the '{component.type}' type should be handled"
        )


def component_key(component: SelectorComponent) -> Optional[str]:
    """Canonical raw text used to look a component up in the selector table.

    Returns None for components that are never renamed.
    """
    if isinstance(component, ClassComponent):
        return CLASS_SIGIL + component.name
    if isinstance(component, IdComponent):
        return ID_SIGIL + component.name
    return None


def _component_for_sigil(sigil: str, name: str) -> SelectorComponent:
    if sigil == ID_SIGIL:
        return IdComponent(name=name)
    return ClassComponent(name=name)


def _with_sigil(original: str, new_value: str) -> str:
    """Store new names with the sigil of the token they replace."""
    sigil = original[:1]
    if sigil in (CLASS_SIGIL, ID_SIGIL):
        return sigil + new_value
    return new_value


def resolve_stored_value(original: str, stored: str) -> Union[str, list[Selector]]:
    """Turn a stored (escaped) selector table value into its replacement.

    - the escape of ``.name`` or ``#name``: one class or id component
    - the escape of a bare identifier: a new name, the component keeps its kind
    - anything else: a complex selector, parsed into components
    """
    value = css_unescape(stored)
    if css_escape(value) != stored:
        logger.debug("Expanding %s into complex selector '%s'", original, value)
        return parse_selector_list(value)

    sigil, name = value[:1], value[1:]
    if sigil in (CLASS_SIGIL, ID_SIGIL) and name:
        return [[_component_for_sigil(sigil, name)]]
    return value


class SelectorWalker:
    """Rewrites selectors through a naming strategy and the selector table."""

    def __init__(self, strategy: NamingStrategy, table: ConversionTable):
        self.strategy = strategy
        self.table = table
        self._handlers = self._build_handlers()

    def _build_handlers(self) -> dict[str, Callable[[SelectorComponent], list[Selector]]]:
        """Build mapping of component types to handler functions."""
        handlers: dict[str, Callable[[SelectorComponent], list[Selector]]] = {
            "class": self._rename,
            "id": self._rename,
            "pseudo-class": self._visit_pseudo_class,
        }
        for component_type in PASS_THROUGH_TYPES:
            handlers[component_type] = self._pass_through
        return handlers

    def visit(self, selector: Selector) -> list[Selector]:
        """Rewrite one selector.

        Returns:
            The rewritten selector, or several when a component expanded into
            a selector list
        """
        results: list[Selector] = [[]]
        for component in selector:
            alternatives = self._visit_component(component)
            results = [head + alternative for head in results for alternative in alternatives]
        return results

    def visit_list(self, selectors: list[Selector]) -> list[Selector]:
        return [result for selector in selectors for result in self.visit(selector)]

    def _visit_component(self, component: SelectorComponent) -> list[Selector]:
        handler = self._handlers.get(component.type)
        if handler is None:
            logger.warning("[unhandled] type: %s", component.type)
            return [[component]]
        return handler(component)

    def _pass_through(self, component: SelectorComponent) -> list[Selector]:
        return [[component]]

    def _rename(self, component: SelectorComponent) -> list[Selector]:
        key = component_key(component)
        if key is None:
            raise SelectorStringifyError(component)

        renamed = self.strategy.rename(
            key,
            self.table,
            on_existence_found=resolve_stored_value,
            on_new_value_before_add=_with_sigil,
        )
        if isinstance(renamed, str):
            return [[component.model_copy(update={"name": renamed})]]
        return renamed

    def _visit_pseudo_class(self, component: SelectorComponent) -> list[Selector]:
        assert isinstance(component, PseudoClassComponent)
        kind = component.kind

        if kind in NTH_PSEUDO_CLASSES:
            if component.of is not None:
                component = component.model_copy(update={"of": self.visit_list(component.of)})
        elif kind == "host":
            if component.selectors is not None:
                component = component.model_copy(update={"selectors": self.visit_list(component.selectors)})
        elif kind in SELECTOR_LIST_PSEUDO_CLASSES:
            component = component.model_copy(update={"selectors": self.visit_list(component.selectors or [])})
        else:
            logger.debug("[unhandled] pseudo-class: %s", kind)

        return [[component]]
