"""Token buffer shared by the tokenizer and the analysis helpers.

A buffer is an immutable, 0-indexed sequence of tokens. Bracket-forming tokens
carry symmetric links to their counterpart, construct owners (function,
closure, class, ...) carry links to their parameter list and body, and every
token points into a flat arena of frames that describes the constructs
enclosing it. The concatenated token contents always reproduce the source.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Kind tag of a token."""

    WHITESPACE = "WHITESPACE"
    COMMENT = "COMMENT"
    DOC_COMMENT = "DOC_COMMENT"
    OPEN_TAG = "OPEN_TAG"
    CLOSE_TAG = "CLOSE_TAG"
    INLINE_HTML = "INLINE_HTML"
    IDENTIFIER = "IDENTIFIER"
    VARIABLE = "VARIABLE"
    KEYWORD = "KEYWORD"
    MODIFIER = "MODIFIER"
    FUNCTION = "FUNCTION"
    CLOSURE = "CLOSURE"
    FN = "FN"
    CLASS = "CLASS"
    ANON_CLASS = "ANON_CLASS"
    INTERFACE = "INTERFACE"
    TRAIT = "TRAIT"
    ENUM = "ENUM"
    NAMESPACE = "NAMESPACE"
    USE = "USE"
    RETURN = "RETURN"
    OPEN_PARENTHESIS = "OPEN_PARENTHESIS"
    CLOSE_PARENTHESIS = "CLOSE_PARENTHESIS"
    OPEN_CURLY_BRACKET = "OPEN_CURLY_BRACKET"
    CLOSE_CURLY_BRACKET = "CLOSE_CURLY_BRACKET"
    OPEN_SQUARE_BRACKET = "OPEN_SQUARE_BRACKET"
    CLOSE_SQUARE_BRACKET = "CLOSE_SQUARE_BRACKET"
    ATTRIBUTE_CLOSER = "ATTRIBUTE_CLOSER"
    COLON = "COLON"
    NULLABLE = "NULLABLE"
    INLINE_THEN = "INLINE_THEN"
    BITWISE_AND = "BITWISE_AND"
    TYPE_INTERSECTION = "TYPE_INTERSECTION"
    BITWISE_OR = "BITWISE_OR"
    ELLIPSIS = "ELLIPSIS"
    EQUAL = "EQUAL"
    COMMA = "COMMA"
    SEMICOLON = "SEMICOLON"
    NS_SEPARATOR = "NS_SEPARATOR"
    STRING_LITERAL = "STRING_LITERAL"
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    OTHER = "OTHER"


# Tokens that open a construct frame when they own a body.
SCOPE_OWNER_KINDS = frozenset(
    {
        TokenKind.FUNCTION,
        TokenKind.CLOSURE,
        TokenKind.CLASS,
        TokenKind.ANON_CLASS,
        TokenKind.INTERFACE,
        TokenKind.TRAIT,
        TokenKind.ENUM,
    }
)

# Tokens whose parameter list directly follows the keyword (and an optional name).
PARAMETERIZED_KINDS = frozenset({TokenKind.FUNCTION, TokenKind.CLOSURE, TokenKind.FN})

_PAIRS = {
    TokenKind.OPEN_PARENTHESIS: TokenKind.CLOSE_PARENTHESIS,
    TokenKind.OPEN_SQUARE_BRACKET: TokenKind.CLOSE_SQUARE_BRACKET,
    TokenKind.OPEN_CURLY_BRACKET: TokenKind.CLOSE_CURLY_BRACKET,
}
_CLOSERS = {closer: opener for opener, closer in _PAIRS.items()}


class MalformedBufferError(AssertionError):
    """The token stream violates the buffer invariants (e.g. unbalanced brackets)."""


@dataclass(frozen=True)
class Token:
    """A single lexical unit with its structural links."""

    kind: TokenKind
    content: str
    line: int = 1
    column: int = 1
    offset: int = 0
    parenthesis_opener: int | None = None
    parenthesis_closer: int | None = None
    bracket_opener: int | None = None
    bracket_closer: int | None = None
    scope_opener: int | None = None
    scope_closer: int | None = None
    frame: int | None = None


@dataclass(frozen=True)
class Frame:
    """An enclosing construct: the owning token, its kind and the enclosing frame."""

    owner: int
    kind: TokenKind
    parent: int | None = None


class TokenBuffer:
    """Immutable token sequence plus the frame arena."""

    def __init__(self, tokens: Sequence[Token], frames: Sequence[Frame] = ()) -> None:
        self._tokens = tuple(tokens)
        self._frames = tuple(frames)

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def frames(self) -> tuple[Frame, ...]:
        return self._frames

    @property
    def source(self) -> str:
        return "".join(token.content for token in self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, pointer: int) -> Token:
        return self._tokens[pointer]

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def conditions(self, pointer: int) -> list[Frame]:
        """Frames enclosing the token at ``pointer``, innermost first."""
        frames: list[Frame] = []
        index = self._tokens[pointer].frame
        while index is not None:
            frame = self._frames[index]
            frames.append(frame)
            index = frame.parent
        return frames

    @classmethod
    def link(cls, raw_tokens: Iterable[tuple[TokenKind, str]]) -> TokenBuffer:
        """Build a buffer from ``(kind, content)`` pairs.

        Positions are derived from the contents, brackets are matched, construct
        owners receive their parameter list and body links, and the frame arena
        is built from the body links.

        Raises:
            MalformedBufferError: If brackets do not balance or a function-like
                owner has no parameter list.
        """
        entries: list[dict] = []
        offset, line, column = 0, 1, 1
        for kind, content in raw_tokens:
            entries.append(
                {"kind": kind, "content": content, "line": line, "column": column, "offset": offset}
            )
            offset += len(content)
            newlines = content.count("\n")
            if newlines:
                line += newlines
                column = len(content) - content.rfind("\n")
            else:
                column += len(content)

        _match_brackets(entries)
        scope_owners = _link_owners(entries)
        frames = _build_frames(entries, scope_owners)

        return cls([Token(**entry) for entry in entries], frames)


def _match_brackets(entries: list[dict]) -> None:
    stack: list[int] = []
    for i, entry in enumerate(entries):
        kind = entry["kind"]
        if kind in _PAIRS:
            stack.append(i)
            continue
        if kind not in _CLOSERS:
            continue
        if not stack or entries[stack[-1]]["kind"] != _CLOSERS[kind]:
            raise MalformedBufferError(
                f"Unmatched {entry['content']!r} at line {entry['line']}, column {entry['column']}"
            )
        opener = stack.pop()
        if kind == TokenKind.CLOSE_PARENTHESIS:
            keys = ("parenthesis_opener", "parenthesis_closer")
        else:
            keys = ("bracket_opener", "bracket_closer")
        for pointer in (opener, i):
            entries[pointer][keys[0]] = opener
            entries[pointer][keys[1]] = i

    if stack:
        entry = entries[stack[-1]]
        raise MalformedBufferError(
            f"Unclosed {entry['content']!r} at line {entry['line']}, column {entry['column']}"
        )


def _next_non_whitespace(entries: list[dict], start: int) -> int | None:
    for i in range(start, len(entries)):
        if entries[i]["kind"] not in (TokenKind.WHITESPACE, TokenKind.COMMENT):
            return i
    return None


def _link_owners(entries: list[dict]) -> list[int]:
    scope_owners: list[int] = []
    for i, entry in enumerate(entries):
        kind = entry["kind"]
        if kind not in SCOPE_OWNER_KINDS and kind not in PARAMETERIZED_KINDS:
            continue

        search_from = i + 1
        if kind in PARAMETERIZED_KINDS:
            opener = None
            for j in range(i + 1, len(entries)):
                if entries[j]["kind"] == TokenKind.OPEN_PARENTHESIS:
                    opener = j
                    break
                if entries[j]["kind"] in (TokenKind.SEMICOLON, TokenKind.OPEN_CURLY_BRACKET):
                    break
            if opener is None:
                raise MalformedBufferError(
                    f"No parameter list for {entry['content']!r} at line {entry['line']}"
                )
            entry["parenthesis_opener"] = opener
            entry["parenthesis_closer"] = entries[opener]["parenthesis_closer"]
            search_from = entry["parenthesis_closer"] + 1
        elif kind == TokenKind.ANON_CLASS:
            following = _next_non_whitespace(entries, i + 1)
            if following is not None and entries[following]["kind"] == TokenKind.OPEN_PARENTHESIS:
                entry["parenthesis_opener"] = following
                entry["parenthesis_closer"] = entries[following]["parenthesis_closer"]

        if kind not in SCOPE_OWNER_KINDS:
            continue

        j = search_from
        while j < len(entries):
            candidate = entries[j]
            if candidate["kind"] == TokenKind.OPEN_CURLY_BRACKET:
                closer = candidate["bracket_closer"]
                for pointer in (i, j, closer):
                    entries[pointer]["scope_opener"] = j
                    entries[pointer]["scope_closer"] = closer
                scope_owners.append(i)
                break
            if candidate["kind"] == TokenKind.SEMICOLON:
                break
            # Skip `use (...)` clauses, constructor arguments and array defaults.
            if candidate["kind"] == TokenKind.OPEN_PARENTHESIS:
                j = candidate["parenthesis_closer"]
            elif candidate["kind"] == TokenKind.OPEN_SQUARE_BRACKET:
                j = candidate["bracket_closer"]
            j += 1
    return scope_owners


def _build_frames(entries: list[dict], scope_owners: list[int]) -> list[Frame]:
    owner_by_opener = {entries[owner]["scope_opener"]: owner for owner in scope_owners}
    closers = {entries[owner]["scope_closer"] for owner in scope_owners}

    frames: list[Frame] = []
    stack: list[int] = []
    for i, entry in enumerate(entries):
        if i in closers:
            stack.pop()
        entry["frame"] = stack[-1] if stack else None
        if i in owner_by_opener:
            owner = owner_by_opener[i]
            frames.append(
                Frame(owner=owner, kind=entries[owner]["kind"], parent=stack[-1] if stack else None)
            )
            stack.append(len(frames) - 1)
    return frames
