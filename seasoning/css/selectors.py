"""Selector parser: CSS selector text -> selector components.

Selector text is tokenized with tinycss2, which already decodes escapes in
identifiers and hashes, and the tokens are folded into the flat component
lists described in ``seasoning.models.selector``.
"""

import logging
from typing import Any

import tinycss2

from seasoning.models.selector import (
    NTH_PSEUDO_CLASSES,
    SELECTOR_LIST_PSEUDO_CLASSES,
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

logger = logging.getLogger(__name__)

COMBINATORS = {
    ">": "child",
    "+": "next-sibling",
    "~": "later-sibling",
}

Token = Any  # tinycss2 node


class SelectorParseError(ValueError):
    """Raised when selector text cannot be parsed."""

    pass


def _is_literal(token: Token | None, value: str) -> bool:
    return token is not None and token.type == "literal" and token.value == value


def _raw(tokens: list[Token]) -> str:
    """Serialize tokens exactly as written (no separator comments)."""
    return "".join(token.serialize() for token in tokens).strip()


def _meaningful(tokens: list[Token]) -> list[Token]:
    return [token for token in tokens if token.type != "comment"]


def _strip_whitespace(tokens: list[Token]) -> list[Token]:
    start, end = 0, len(tokens)
    while start < end and tokens[start].type == "whitespace":
        start += 1
    while end > start and tokens[end - 1].type == "whitespace":
        end -= 1
    return tokens[start:end]


def _split_top_level(tokens: list[Token], separator: str = ",") -> list[list[Token]]:
    """Split tokens on a literal separator. Blocks are single tokens, so only
    top-level separators are seen."""
    groups: list[list[Token]] = [[]]
    for token in tokens:
        if _is_literal(token, separator):
            groups.append([])
        else:
            groups[-1].append(token)
    return groups


def _error(message: str, tokens: list[Token]) -> SelectorParseError:
    return SelectorParseError(f"{message} in selector '{_raw(tokens)}'")


def _parse_attribute(block: Token) -> AttributeComponent:
    content = _meaningful(block.content)
    names = [token.value for token in content if token.type == "ident"]
    if not names:
        raise _error("Attribute selector without a name", [block])
    return AttributeComponent(name=names[0], raw=_raw(block.content))


def _split_nth_of(arguments: list[Token]) -> tuple[list[Token], list[Token] | None]:
    for index, token in enumerate(arguments):
        if token.type == "ident" and token.lower_value == "of":
            return arguments[:index], arguments[index + 1 :]
    return arguments, None


def _parse_pseudo_class_function(function: Token) -> PseudoClassComponent:
    kind = function.lower_name
    arguments = function.arguments

    if kind in SELECTOR_LIST_PSEUDO_CLASSES or kind == "host":
        return PseudoClassComponent(kind=kind, selectors=_parse_selector_tokens(arguments))

    if kind in NTH_PSEUDO_CLASSES:
        nth, of = _split_nth_of(arguments)
        return PseudoClassComponent(
            kind=kind,
            arguments=_raw(nth),
            of=_parse_selector_tokens(of) if of is not None else None,
        )

    return PseudoClassComponent(kind=kind, arguments=_raw(arguments))


def _parse_pseudo(tokens: list[Token], index: int) -> tuple[SelectorComponent, int]:
    """Parse a pseudo-class or pseudo-element starting at the ':' token."""
    is_element = _is_literal(tokens[index + 1] if index + 1 < len(tokens) else None, ":")
    name_index = index + 2 if is_element else index + 1
    if name_index >= len(tokens):
        raise _error("Missing pseudo name", tokens)

    token = tokens[name_index]
    if is_element:
        if token.type == "ident":
            return PseudoElementComponent(name=token.lower_value), name_index + 1
        if token.type == "function":
            return (
                PseudoElementComponent(name=token.lower_name, arguments=_raw(token.arguments)),
                name_index + 1,
            )
    else:
        if token.type == "ident":
            return PseudoClassComponent(kind=token.lower_value), name_index + 1
        if token.type == "function":
            return _parse_pseudo_class_function(token), name_index + 1

    raise _error(f"Unexpected token '{token.serialize()}' after ':'", tokens)


def _parse_simple(tokens: list[Token], index: int) -> tuple[list[SelectorComponent], int]:
    """Parse one simple selector (plus its namespace prefix, if any)."""
    token = tokens[index]
    following = tokens[index + 1] if index + 1 < len(tokens) else None

    if _is_literal(token, "."):
        if following is None or following.type != "ident":
            raise _error("Expected a class name after '.'", tokens)
        return [ClassComponent(name=following.value)], index + 2

    if token.type == "hash":
        return [IdComponent(name=token.value)], index + 1

    if token.type == "ident" or _is_literal(token, "*"):
        if _is_literal(following, "|"):
            prefix = "*" if _is_literal(token, "*") else token.value
            return [NamespaceComponent(prefix=prefix)], index + 2
        if token.type == "ident":
            return [TypeComponent(name=token.value)], index + 1
        return [UniversalComponent()], index + 1

    if _is_literal(token, "|"):
        return [NamespaceComponent(prefix="")], index + 1

    if _is_literal(token, "&"):
        return [NestingComponent()], index + 1

    if token.type == "[] block":
        return [_parse_attribute(token)], index + 1

    if _is_literal(token, ":"):
        component, next_index = _parse_pseudo(tokens, index)
        return [component], next_index

    raise _error(f"Unexpected token '{token.serialize()}'", tokens)


def _parse_complex(tokens: list[Token]) -> Selector:
    tokens = _strip_whitespace(_meaningful(tokens))
    if not tokens:
        raise SelectorParseError("Empty selector")

    components: Selector = []
    pending_whitespace = False
    index = 0
    while index < len(tokens):
        token = tokens[index]

        if token.type == "whitespace":
            pending_whitespace = True
            index += 1
            continue

        if token.type == "literal" and token.value in COMBINATORS:
            components.append(CombinatorComponent(value=COMBINATORS[token.value]))
            pending_whitespace = False
            index += 1
            continue

        if pending_whitespace and components and components[-1].type != "combinator":
            components.append(CombinatorComponent(value="descendant"))
        pending_whitespace = False

        parsed, index = _parse_simple(tokens, index)
        components.extend(parsed)

    if components[-1].type == "combinator":
        raise _error("Dangling combinator", tokens)
    return components


def _parse_selector_tokens(tokens: list[Token]) -> list[Selector]:
    if not _strip_whitespace(_meaningful(tokens)):
        return []
    return [_parse_complex(group) for group in _split_top_level(tokens)]


def parse_selector_list(text: str) -> list[Selector]:
    """Parse a comma-separated selector list.

    Args:
        text: Selector text, e.g. ``.a > .b, div:not(.c)``

    Returns:
        One component list per selector

    Raises:
        SelectorParseError: If the text is not a selector list
    """
    tokens = tinycss2.parse_component_value_list(text)
    errors = [token for token in tokens if token.type == "error"]
    if errors:
        raise SelectorParseError(f"Invalid selector '{text}': {errors[0].message}")
    return _parse_selector_tokens(tokens)


def parse_selector(text: str) -> Selector:
    """Parse text holding exactly one selector."""
    selectors = parse_selector_list(text)
    if len(selectors) != 1:
        raise SelectorParseError(f"Expected exactly one selector in '{text}', found {len(selectors)}")
    return selectors[0]
