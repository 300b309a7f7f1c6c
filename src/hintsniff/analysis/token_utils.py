"""Navigation helpers over a token buffer.

All helpers are free functions taking the buffer explicitly. Search ranges are
half-open: ``end`` is exclusive when searching forward and ``end`` is the
lowest inspected index when searching backward.
"""

from __future__ import annotations

from collections.abc import Collection

from hintsniff.core.tokens import TokenBuffer, TokenKind

INEFFECTIVE_KINDS = frozenset({TokenKind.WHITESPACE, TokenKind.COMMENT, TokenKind.DOC_COMMENT})


def find_next(
    buffer: TokenBuffer, kinds: Collection[TokenKind], start: int, end: int | None = None
) -> int | None:
    """First index in ``[start, end)`` whose kind is in ``kinds``."""
    stop = len(buffer) if end is None else min(end, len(buffer))
    for i in range(start, stop):
        if buffer[i].kind in kinds:
            return i
    return None


def find_next_excluding(
    buffer: TokenBuffer, kinds: Collection[TokenKind], start: int, end: int | None = None
) -> int | None:
    """First index in ``[start, end)`` whose kind is not in ``kinds``."""
    stop = len(buffer) if end is None else min(end, len(buffer))
    for i in range(start, stop):
        if buffer[i].kind not in kinds:
            return i
    return None


def find_previous(
    buffer: TokenBuffer, kinds: Collection[TokenKind], start: int, end: int = 0
) -> int | None:
    """Last index in ``[end, start]`` whose kind is in ``kinds``."""
    for i in range(min(start, len(buffer) - 1), max(end, 0) - 1, -1):
        if buffer[i].kind in kinds:
            return i
    return None


def find_previous_excluding(
    buffer: TokenBuffer, kinds: Collection[TokenKind], start: int, end: int = 0
) -> int | None:
    """Last index in ``[end, start]`` whose kind is not in ``kinds``."""
    for i in range(min(start, len(buffer) - 1), max(end, 0) - 1, -1):
        if buffer[i].kind not in kinds:
            return i
    return None


def find_next_effective(buffer: TokenBuffer, start: int, end: int | None = None) -> int | None:
    return find_next_excluding(buffer, INEFFECTIVE_KINDS, start, end)


def find_previous_effective(buffer: TokenBuffer, start: int, end: int = 0) -> int | None:
    return find_previous_excluding(buffer, INEFFECTIVE_KINDS, start, end)


def find_next_local(
    buffer: TokenBuffer, kinds: Collection[TokenKind], start: int
) -> int | None:
    """Like :func:`find_next`, but gives up at the end of the current statement."""
    for i in range(start, len(buffer)):
        if buffer[i].kind in kinds:
            return i
        if buffer[i].kind == TokenKind.SEMICOLON:
            return None
    return None


def get_pointers_of_kind(
    buffer: TokenBuffer, kinds: Collection[TokenKind], start: int = 0, end: int | None = None
) -> list[int]:
    stop = len(buffer) if end is None else min(end, len(buffer))
    return [i for i in range(start, stop) if buffer[i].kind in kinds]
