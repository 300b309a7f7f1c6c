"""Shared pytest fixtures for hintsniff tests."""

import re
from collections.abc import Callable
from pathlib import Path

import pytest
from dotenv import load_dotenv
from hypothesis import settings

from hintsniff.adapters import PhpTokenizer
from hintsniff.core.tokens import TokenBuffer, TokenKind

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


_SYNTHETIC_RE = re.compile(
    r"\s+|/\*\*.*?\*/|/\*.*?\*/|//[^\n]*|\$\w+|\.\.\.|\\|\w+|.",
    re.DOTALL,
)

_SYNTHETIC_WORDS = {
    "function": TokenKind.FUNCTION,
    "fn": TokenKind.FN,
    "class": TokenKind.CLASS,
    "interface": TokenKind.INTERFACE,
    "trait": TokenKind.TRAIT,
    "enum": TokenKind.ENUM,
    "namespace": TokenKind.NAMESPACE,
    "return": TokenKind.RETURN,
    "use": TokenKind.USE,
    "new": TokenKind.KEYWORD,
    "if": TokenKind.KEYWORD,
    "public": TokenKind.MODIFIER,
    "protected": TokenKind.MODIFIER,
    "private": TokenKind.MODIFIER,
    "static": TokenKind.MODIFIER,
    "abstract": TokenKind.MODIFIER,
    "final": TokenKind.MODIFIER,
}

_SYNTHETIC_PUNCTUATION = {
    "(": TokenKind.OPEN_PARENTHESIS,
    ")": TokenKind.CLOSE_PARENTHESIS,
    "{": TokenKind.OPEN_CURLY_BRACKET,
    "}": TokenKind.CLOSE_CURLY_BRACKET,
    "[": TokenKind.OPEN_SQUARE_BRACKET,
    "]": TokenKind.CLOSE_SQUARE_BRACKET,
    ":": TokenKind.COLON,
    "?": TokenKind.NULLABLE,
    "&": TokenKind.BITWISE_AND,
    "|": TokenKind.BITWISE_OR,
    "...": TokenKind.ELLIPSIS,
    "=": TokenKind.EQUAL,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "\\": TokenKind.NS_SEPARATOR,
}


def synthetic_buffer(source: str) -> TokenBuffer:
    """Link a buffer from a PHP-like snippet without a real parser.

    Every `?` is a nullability marker, `function` directly followed by `(` is
    a closure and `class` after `new` is an anonymous class.
    """
    pieces = _SYNTHETIC_RE.findall(source)
    raw: list[tuple[TokenKind, str]] = []
    for index, piece in enumerate(pieces):
        if piece.isspace():
            kind = TokenKind.WHITESPACE
        elif piece.startswith("/**"):
            kind = TokenKind.DOC_COMMENT
        elif piece.startswith(("/*", "//")):
            kind = TokenKind.COMMENT
        elif piece.startswith("$"):
            kind = TokenKind.VARIABLE
        elif piece.isdigit():
            kind = TokenKind.NUMBER
        elif piece in _SYNTHETIC_WORDS:
            kind = _SYNTHETIC_WORDS[piece]
        elif piece.isidentifier():
            kind = TokenKind.IDENTIFIER
        else:
            kind = _SYNTHETIC_PUNCTUATION.get(piece, TokenKind.OPERATOR)

        following = [p for p in pieces[index + 1 :] if not p.isspace()]
        if kind == TokenKind.FUNCTION and (following[:1] == ["("] or following[:2] == ["&", "("]):
            kind = TokenKind.CLOSURE
        if kind == TokenKind.CLASS and _last_effective(raw) == "new":
            kind = TokenKind.ANON_CLASS
        raw.append((kind, piece))
    return TokenBuffer.link(raw)


def _last_effective(raw: list[tuple[TokenKind, str]]) -> str:
    for kind, piece in reversed(raw):
        if kind != TokenKind.WHITESPACE:
            return piece
    return ""


def first_pointer(buffer: TokenBuffer, kind: TokenKind, nth: int = 0) -> int:
    return [i for i, token in enumerate(buffer) if token.kind == kind][nth]


@pytest.fixture
def synth() -> Callable[[str], TokenBuffer]:
    """Build synthetic token buffers from PHP-like snippets."""
    return synthetic_buffer


@pytest.fixture
def pointer_of() -> Callable[..., int]:
    """Find the n-th token of a kind in a buffer."""
    return first_pointer


@pytest.fixture(scope="session")
def php_tokenizer() -> PhpTokenizer:
    return PhpTokenizer()


@pytest.fixture
def php_fixtures_path() -> Path:
    return Path(__file__).parent / "fixtures" / "php"
