"""PHP tokenizer using tree-sitter-php.

The syntax tree is flattened into leaf tokens in source order. Names,
variables, primitive types, literals, comments and modifiers are kept whole;
every other node is split into its children. The gaps between leaves become
whitespace tokens so that the token contents add up to the parsed source.
The resulting stream is linked into a :class:`TokenBuffer`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import tree_sitter_php as tsphp
from tree_sitter import Language, Node, Parser

from hintsniff.adapters.base import Tokenizer
from hintsniff.adapters.php.ast_utils import PhpAstUtils
from hintsniff.core.tokens import TokenBuffer, TokenKind

logger = logging.getLogger(__name__)


class PhpTokenizer(Tokenizer):
    """PHP tokenizer backed by tree-sitter."""

    def __init__(self) -> None:
        self._language = Language(tsphp.language_php())
        self._parser = Parser(self._language)

    @property
    def language(self) -> str:
        return "php"

    @property
    def file_extensions(self) -> tuple[str, ...]:
        return (".php",)

    def tokenize(self, source: str) -> TokenBuffer:
        content = source.encode("utf-8")
        tree = self._parser.parse(content)
        if tree.root_node.has_error:
            logger.warning("Syntax errors found, tokens may be incomplete")
        return TokenBuffer.link(self._raw_tokens(tree.root_node, content))

    def _raw_tokens(self, root: Node, content: bytes) -> Iterator[tuple[TokenKind, str]]:
        position = 0
        for node in sorted(self._leaves(root), key=lambda n: n.start_byte):
            if node.start_byte < position:
                # Overlaps a token already emitted (error recovery artefact).
                continue
            if node.start_byte > position:
                yield self._gap(content[position : node.start_byte])
            text = PhpAstUtils.get_node_text(node, content)
            yield PhpAstUtils.classify(node, text), text
            position = node.end_byte
        if position < len(content):
            yield self._gap(content[position:])

    def _leaves(self, node: Node) -> Iterator[Node]:
        for child in node.children:
            if child.start_byte == child.end_byte:
                # MISSING nodes inserted by error recovery have no text.
                continue
            if PhpAstUtils.is_atomic(child):
                yield child
            else:
                yield from self._leaves(child)

    @staticmethod
    def _gap(raw: bytes) -> tuple[TokenKind, str]:
        text = raw.decode("utf-8", errors="ignore")
        return (TokenKind.WHITESPACE if text.isspace() else TokenKind.OTHER), text
