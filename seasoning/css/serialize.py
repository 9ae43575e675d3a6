"""Selector serializer: selector components -> CSS selector text."""

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
from seasoning.pipeline.escape import css_escape

COMBINATOR_SYMBOLS = {
    "descendant": " ",
    "child": ">",
    "next-sibling": "+",
    "later-sibling": "~",
}


def _stringify_combinator(component: CombinatorComponent, minify: bool) -> str:
    symbol = COMBINATOR_SYMBOLS[component.value]
    if symbol == " " or minify:
        return symbol
    return f" {symbol} "


def _stringify_pseudo_class(component: PseudoClassComponent, minify: bool) -> str:
    if component.selectors is not None:
        return f":{component.kind}({stringify_selector_list(component.selectors, minify)})"
    if component.of is not None:
        nth = component.arguments or ""
        return f":{component.kind}({nth} of {stringify_selector_list(component.of, minify)})"
    if component.arguments is not None:
        return f":{component.kind}({component.arguments})"
    return f":{component.kind}"


def stringify_component(component: SelectorComponent, minify: bool = False) -> str:
    """Convert a single component to CSS text.

    Raises:
        TypeError: If the component is not a known selector component
    """
    if isinstance(component, ClassComponent):
        return "." + css_escape(component.name)
    if isinstance(component, IdComponent):
        return "#" + css_escape(component.name)
    if isinstance(component, TypeComponent):
        return css_escape(component.name)
    if isinstance(component, UniversalComponent):
        return "*"
    if isinstance(component, AttributeComponent):
        return f"[{component.raw}]"
    if isinstance(component, CombinatorComponent):
        return _stringify_combinator(component, minify)
    if isinstance(component, NamespaceComponent):
        prefix = component.prefix if component.prefix in ("", "*") else css_escape(component.prefix)
        return prefix + "|"
    if isinstance(component, NestingComponent):
        return "&"
    if isinstance(component, PseudoClassComponent):
        return _stringify_pseudo_class(component, minify)
    if isinstance(component, PseudoElementComponent):
        if component.arguments is not None:
            return f"::{component.name}({component.arguments})"
        return f"::{component.name}"
    raise TypeError(f"Unknown selector component: {component!r}")


def stringify_selector(selector: Selector, minify: bool = False) -> str:
    """Convert a selector (component list) to CSS text."""
    return "".join(stringify_component(component, minify) for component in selector).strip()


def stringify_selector_list(selectors: list[Selector], minify: bool = False) -> str:
    """Convert a selector list to comma-separated CSS text."""
    separator = "," if minify else ", "
    return separator.join(stringify_selector(selector, minify) for selector in selectors)
