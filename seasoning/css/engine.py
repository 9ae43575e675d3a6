"""Stylesheet engine: tree-sitter traversal with selector and identifier hooks.

The stylesheet is parsed with the tree-sitter CSS grammar and walked leaf by
leaf in document order. Every rule prelude (the selector list in front of a
block) is handed to a selector visitor and every dashed identifier outside a
prelude to an identifier visitor. Everything else is copied through, either
verbatim or minified.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator

from tree_sitter import Node, Tree
from tree_sitter_language_pack import get_parser

from seasoning.config import EngineSettings
from seasoning.css.selectors import SelectorParseError, parse_selector_list
from seasoning.css.serialize import stringify_selector_list
from seasoning.models.selector import Selector
from seasoning.pipeline.escape import css_escape, css_unescape

logger = logging.getLogger(__name__)

SelectorVisitor = Callable[[Selector], list[Selector]]
IdentVisitor = Callable[[str], str]

# Nodes emitted as a whole, without descending into their children
ATOMIC_NODE_TYPES = frozenset({"string_value", "comment", "js_comment"})
COMMENT_NODE_TYPES = frozenset({"comment", "js_comment"})
# Leaf nodes that can hold a dashed identifier such as --main-color
DASHED_IDENT_NODE_TYPES = frozenset(
    {"property_name", "plain_value", "identifier", "keyword_query", "feature_name"}
)
# Tokens that never need surrounding whitespace when minifying
TIGHT_TOKENS = frozenset({b"{", b"}", b";", b",", b":"})


@dataclass
class EngineOutput:
    """Rewritten stylesheet plus anything the engine had to report."""

    css: str
    warnings: list[str] = field(default_factory=list)


@dataclass
class _Token:
    start: int
    end: int
    text: bytes
    node_type: str


def parse_stylesheet(source: bytes, filename: str = "style.css") -> Tree:
    """Parse stylesheet source using tree-sitter.

    Raises:
        RuntimeError: If the CSS parser is unavailable or parsing fails
    """
    try:
        parser = get_parser("css")
    except Exception as e:
        raise RuntimeError(f"Failed to get parser for css: {e}") from e

    try:
        tree = parser.parse(source)
    except Exception as e:
        raise RuntimeError(f"Failed to parse {filename}: {e}") from e

    if tree.root_node.has_error:
        logger.warning(f"Parse tree contains errors for {filename}")

    return tree


class StylesheetRewriter:
    """Walks one parsed stylesheet and assembles the rewritten text."""

    def __init__(
        self,
        source: bytes,
        selector_visitor: SelectorVisitor,
        ident_visitor: IdentVisitor,
        settings: EngineSettings,
    ):
        self.source = source
        self.selector_visitor = selector_visitor
        self.ident_visitor = ident_visitor
        self.settings = settings
        self.warnings: list[str] = []

    def rewrite(self, tree: Tree) -> EngineOutput:
        tokens = [t for t in self._tokens(tree.root_node) if t.text or t.end > t.start]
        if self.settings.minify:
            output = self._join_minified(tokens)
        else:
            output = self._join_verbatim(tokens)
        return EngineOutput(css=output.decode("utf-8"), warnings=self.warnings)

    def _warn(self, node: Node, message: str) -> None:
        row, column = node.start_point
        warning = f"{self.settings.filename}:{row + 1}:{column + 1}: {message}"
        logger.warning(warning)
        self.warnings.append(warning)

    def _tokens(self, node: Node) -> Iterator[_Token]:
        if node.type == "ERROR":
            self._warn(node, "syntax error, content left unchanged")

        if node.type == "rule_set":
            yield from self._rule_set_tokens(node)
            return

        if node.child_count == 0 or node.type in ATOMIC_NODE_TYPES:
            yield self._leaf_token(node)
            return

        for child in node.children:
            yield from self._tokens(child)

    def _rule_set_tokens(self, node: Node) -> Iterator[_Token]:
        children = node.children
        block_index = next((i for i, child in enumerate(children) if child.type == "block"), None)
        if not block_index:
            for child in children:
                yield from self._tokens(child)
            return

        yield self._prelude_token(children[0], children[block_index - 1])
        for child in children[block_index:]:
            yield from self._tokens(child)

    def _prelude_token(self, first: Node, last: Node) -> _Token:
        start, end = first.start_byte, last.end_byte
        text = self.source[start:end]
        try:
            selectors = parse_selector_list(text.decode("utf-8"))
        except SelectorParseError as e:
            self._warn(first, f"{e}; selector left unchanged")
            return _Token(start, end, text, "selectors")

        rewritten = [result for selector in selectors for result in self.selector_visitor(selector)]
        replacement = stringify_selector_list(rewritten, minify=self.settings.minify)
        return _Token(start, end, replacement.encode("utf-8"), "selectors")

    def _leaf_token(self, node: Node) -> _Token:
        text = self.source[node.start_byte : node.end_byte]
        if node.type in DASHED_IDENT_NODE_TYPES and text.startswith(b"--") and len(text) > 2:
            text = self._rewrite_ident(text)
        return _Token(node.start_byte, node.end_byte, text, node.type)

    def _rewrite_ident(self, text: bytes) -> bytes:
        ident = "--" + css_unescape(text.decode("utf-8")[2:])
        renamed = self.ident_visitor(ident)
        if renamed.startswith("--"):
            renamed = "--" + css_escape(renamed[2:])
        return renamed.encode("utf-8")

    def _join_verbatim(self, tokens: list[_Token]) -> bytes:
        pieces: list[bytes] = []
        cursor = 0
        for token in tokens:
            pieces.append(self.source[cursor : token.start])
            pieces.append(token.text)
            cursor = token.end
        pieces.append(self.source[cursor:])
        return b"".join(pieces)

    def _gap_tokens(self, start: int, end: int) -> Iterator[_Token]:
        """Text between leaves that no node covers (e.g. the digits of ``10px``)."""
        gap = self.source[start:end]
        content = gap.strip()
        if content:
            offset = start + gap.index(content)
            yield _Token(offset, offset + len(content), content, "gap")

    def _with_gaps(self, tokens: list[_Token]) -> list[_Token]:
        filled: list[_Token] = []
        cursor = 0
        for token in tokens:
            filled.extend(self._gap_tokens(cursor, token.start))
            filled.append(token)
            cursor = token.end
        filled.extend(self._gap_tokens(cursor, len(self.source)))
        return filled

    def _join_minified(self, tokens: list[_Token]) -> bytes:
        tokens = [t for t in self._with_gaps(tokens) if t.node_type not in COMMENT_NODE_TYPES]
        pieces: list[bytes] = []
        previous: _Token | None = None
        for index, token in enumerate(tokens):
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            # Last declaration of a block needs no terminator
            if token.text == b";" and following is not None and following.text == b"}":
                continue
            if previous is not None and self._needs_space(previous, token):
                pieces.append(b" ")
            pieces.append(token.text)
            previous = token
        return b"".join(pieces)

    def _needs_space(self, previous: _Token, token: _Token) -> bool:
        if previous.end == token.start:
            return False
        if previous.text in TIGHT_TOKENS or token.text in TIGHT_TOKENS:
            return False
        return token.node_type != "important"


def transform_stylesheet(
    css: str,
    selector_visitor: SelectorVisitor,
    ident_visitor: IdentVisitor,
    settings: EngineSettings,
) -> EngineOutput:
    """Rewrite a stylesheet through the selector and identifier visitors.

    Args:
        css: Stylesheet text
        selector_visitor: Called once per selector of every rule prelude;
            returns the selector(s) to write in its place
        ident_visitor: Called with every dashed identifier (``--name``)
        settings: Engine settings (minify, filename)

    Returns:
        EngineOutput with the rewritten css and any warnings
    """
    logger.debug(f"Transforming stylesheet: {settings.filename}")

    source = css.encode("utf-8")
    tree = parse_stylesheet(source, settings.filename)
    output = StylesheetRewriter(source, selector_visitor, ident_visitor, settings).rewrite(tree)

    logger.debug(f"Rewrote {settings.filename} with {len(output.warnings)} warning(s)")
    return output
