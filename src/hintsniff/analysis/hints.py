"""Type hint reconstruction from token ranges.

A hint may span several tokens (``\\Foo\\Bar``, ``int|string``), may be
preceded by a nullability marker and, for parameters, may be separated from
the variable by by-reference or variadic markers. One scanning routine covers
both directions; where the scan stops is decided by an explicit boundary
value rather than by separate scan implementations.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Union

from hintsniff.analysis.token_utils import INEFFECTIVE_KINDS, find_next_effective
from hintsniff.core.models import TypeHint
from hintsniff.core.tokens import TokenBuffer, TokenKind

FORWARD = 1
BACKWARD = -1


@dataclass(frozen=True)
class Bounded:
    """Scan no further than ``end`` (inclusive) in the scan direction."""

    end: int


@dataclass(frozen=True)
class UnboundedUntil:
    """Scan until a token of one of ``terminators`` appears."""

    terminators: frozenset[TokenKind]


ScanBoundary = Union[Bounded, UnboundedUntil]

PARAMETER_TRANSPARENT_KINDS = INEFFECTIVE_KINDS | {TokenKind.BITWISE_AND, TokenKind.ELLIPSIS}
PARAMETER_TERMINATOR_KINDS = frozenset(
    {
        TokenKind.COMMA,
        TokenKind.MODIFIER,
        TokenKind.ATTRIBUTE_CLOSER,
    }
)
RETURN_TERMINATOR_KINDS = frozenset({TokenKind.OPEN_CURLY_BRACKET, TokenKind.SEMICOLON})


def assemble_hint(
    buffer: TokenBuffer,
    start: int,
    boundary: ScanBoundary,
    direction: int,
    transparent: Collection[TokenKind],
    terminators: Collection[TokenKind],
) -> TypeHint | None:
    """Collect hint fragments from ``start`` in ``direction``.

    Transparent tokens are skipped, a nullability marker sets ``is_nullable``
    and is left out of the text. Returns None when nothing was collected.
    """
    stop_kinds = set(terminators)
    if isinstance(boundary, UnboundedUntil):
        stop_kinds |= boundary.terminators

    fragments: list[str] = []
    is_nullable = False
    pointer = start
    while 0 <= pointer < len(buffer):
        if isinstance(boundary, Bounded):
            if direction == FORWARD and pointer > boundary.end:
                break
            if direction == BACKWARD and pointer < boundary.end:
                break

        token = buffer[pointer]
        if token.kind in stop_kinds:
            break
        if token.kind == TokenKind.NULLABLE:
            is_nullable = True
        elif token.kind not in transparent:
            if direction == BACKWARD:
                fragments.insert(0, token.content)
            else:
                fragments.append(token.content)
        pointer += direction

    if not fragments:
        return None
    return TypeHint(text="".join(fragments), is_nullable=is_nullable)


def is_optional_parameter(buffer: TokenBuffer, variable_pointer: int, list_closer: int) -> bool:
    """True when a default value assignment follows the parameter variable."""
    following = find_next_effective(buffer, variable_pointer + 1, list_closer)
    return following is not None and buffer[following].kind == TokenKind.EQUAL


def assemble_parameter_hint(
    buffer: TokenBuffer, variable_pointer: int, list_opener: int, list_closer: int
) -> TypeHint | None:
    """Hint of the parameter whose variable token is at ``variable_pointer``."""
    hint = assemble_hint(
        buffer,
        variable_pointer - 1,
        Bounded(list_opener + 1),
        BACKWARD,
        PARAMETER_TRANSPARENT_KINDS,
        PARAMETER_TERMINATOR_KINDS,
    )
    if hint is None:
        return None
    if is_optional_parameter(buffer, variable_pointer, list_closer):
        return hint.model_copy(update={"is_optional": True})
    return hint


def assemble_return_hint(
    buffer: TokenBuffer, colon_pointer: int, boundary: ScanBoundary
) -> TypeHint | None:
    """Hint following the return type colon."""
    return assemble_hint(
        buffer,
        colon_pointer + 1,
        boundary,
        FORWARD,
        INEFFECTIVE_KINDS,
        RETURN_TERMINATOR_KINDS,
    )
