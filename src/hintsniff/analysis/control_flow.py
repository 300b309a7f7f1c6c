"""Classification of return statements inside a declaration body."""

from __future__ import annotations

from dataclasses import dataclass

from hintsniff.analysis.token_utils import find_next_effective
from hintsniff.core.tokens import TokenBuffer, TokenKind

# Constructs whose return statements never belong to an enclosing declaration.
NESTED_RETURN_OWNER_KINDS = frozenset({TokenKind.CLOSURE, TokenKind.ANON_CLASS})

_STATEMENT_TERMINATORS = frozenset({TokenKind.SEMICOLON, TokenKind.CLOSE_TAG})


@dataclass(frozen=True)
class ReturnSummary:
    returns_value: bool = False
    returns_void: bool = False


def belongs_to(buffer: TokenBuffer, pointer: int, function_pointer: int) -> bool:
    """Whether the token at ``pointer`` is attributed to ``function_pointer``.

    The construct stack is walked innermost first. The declaration's own frame
    claims the token; a closure or anonymous class met before it claims the
    token for itself. Other frames, such as a named function declared inside
    the body, are walked past.
    """
    for frame in buffer.conditions(pointer):
        if frame.owner == function_pointer:
            return True
        if frame.kind in NESTED_RETURN_OWNER_KINDS:
            return False
    return False


def is_void_return(buffer: TokenBuffer, return_pointer: int) -> bool:
    following = find_next_effective(buffer, return_pointer + 1)
    return following is None or buffer[following].kind in _STATEMENT_TERMINATORS


def scan_returns(buffer: TokenBuffer, function_pointer: int) -> ReturnSummary:
    """Classify the return statements that belong to the declaration.

    Both flags are computed independently; a body with ``return;`` and
    ``return $x;`` reports both. Declarations without a body report neither.
    """
    token = buffer[function_pointer]
    if token.scope_opener is None or token.scope_closer is None:
        return ReturnSummary()

    returns_value = False
    returns_void = False
    for i in range(token.scope_opener + 1, token.scope_closer):
        if buffer[i].kind != TokenKind.RETURN:
            continue
        if not belongs_to(buffer, i, function_pointer):
            continue
        if is_void_return(buffer, i):
            returns_void = True
        else:
            returns_value = True
        if returns_value and returns_void:
            break

    return ReturnSummary(returns_value=returns_value, returns_void=returns_void)


def returns_value(buffer: TokenBuffer, function_pointer: int) -> bool:
    return scan_returns(buffer, function_pointer).returns_value


def returns_void(buffer: TokenBuffer, function_pointer: int) -> bool:
    return scan_returns(buffer, function_pointer).returns_void
