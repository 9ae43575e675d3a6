"""Selector components as produced by the selector parser.

A selector is a flat list of components; combinators are components too, so
``div > .a:not(.b)`` is ``[type, combinator, class, pseudo-class]``. Names are
stored raw (unescaped); escaping happens when a selector is stringified.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

CombinatorValue = Literal["descendant", "child", "next-sibling", "later-sibling"]


class TypeComponent(BaseModel):
    """Element type selector, e.g. ``div``."""

    type: Literal["type"] = "type"
    name: str = Field(description="Element name")


class IdComponent(BaseModel):
    """Id selector, e.g. ``#main``."""

    type: Literal["id"] = "id"
    name: str = Field(description="Id without the leading '#'")


class ClassComponent(BaseModel):
    """Class selector, e.g. ``.button``."""

    type: Literal["class"] = "class"
    name: str = Field(description="Class name without the leading '.'")


class UniversalComponent(BaseModel):
    type: Literal["universal"] = "universal"


class AttributeComponent(BaseModel):
    """Attribute selector, e.g. ``[data-role="button"]``."""

    type: Literal["attribute"] = "attribute"
    name: str = Field(description="Attribute name")
    raw: str = Field(description="Contents of the brackets as written")


class CombinatorComponent(BaseModel):
    type: Literal["combinator"] = "combinator"
    value: CombinatorValue


class NamespaceComponent(BaseModel):
    """Namespace prefix of the following type or universal selector."""

    type: Literal["namespace"] = "namespace"
    prefix: str = Field(description="Namespace prefix; '' for no namespace, '*' for any")


class NestingComponent(BaseModel):
    type: Literal["nesting"] = "nesting"


class PseudoClassComponent(BaseModel):
    """Pseudo-class, e.g. ``:hover``, ``:not(.a)`` or ``:nth-child(2n of .a)``."""

    type: Literal["pseudo-class"] = "pseudo-class"
    kind: str = Field(description="Lower-cased pseudo-class name")
    arguments: Optional[str] = Field(
        default=None,
        description="Raw argument text for opaque arguments or the An+B part of nth-child",
    )
    selectors: Optional[list["Selector"]] = Field(
        default=None, description="Nested selector list (:not, :is, :where, :has, :host, ...)"
    )
    of: Optional[list["Selector"]] = Field(
        default=None, description="Selector list after 'of' in :nth-child/:nth-last-child"
    )


class PseudoElementComponent(BaseModel):
    type: Literal["pseudo-element"] = "pseudo-element"
    name: str
    arguments: Optional[str] = None


SelectorComponent = Annotated[
    Union[
        TypeComponent,
        IdComponent,
        ClassComponent,
        UniversalComponent,
        AttributeComponent,
        CombinatorComponent,
        NamespaceComponent,
        NestingComponent,
        PseudoClassComponent,
        PseudoElementComponent,
    ],
    Field(discriminator="type"),
]

Selector = list[SelectorComponent]

PseudoClassComponent.model_rebuild()

# Pseudo-classes whose argument is a selector list
SELECTOR_LIST_PSEUDO_CLASSES = frozenset({"not", "where", "is", "any", "-webkit-any", "-moz-any", "has"})
NTH_PSEUDO_CLASSES = frozenset({"nth-child", "nth-last-child"})
