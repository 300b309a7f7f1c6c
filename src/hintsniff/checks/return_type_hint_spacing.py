"""Spacing around the return type hint colon.

``function foo(): int`` is the only accepted form: no whitespace before the
colon, exactly one space after it, and nothing between a nullability symbol
and the hint itself.
"""

from __future__ import annotations

from hintsniff.analysis.functions import (
    find_return_colon,
    find_return_type_hint,
    get_function_pointers,
)
from hintsniff.analysis.token_utils import find_next_effective
from hintsniff.checks.base import Check
from hintsniff.core.models import Diagnostic, Fix
from hintsniff.core.tokens import Token, TokenBuffer, TokenKind

CODE_WHITESPACE_BEFORE_COLON = "WhitespaceBeforeColon"
CODE_NO_SPACE_BETWEEN_COLON_AND_TYPE_HINT = "NoSpaceBetweenColonAndTypeHint"
CODE_MULTIPLE_SPACES_BETWEEN_COLON_AND_TYPE_HINT = "MultipleSpacesBetweenColonAndTypeHint"
CODE_NO_SPACE_BETWEEN_COLON_AND_NULLABILITY_SYMBOL = "NoSpaceBetweenColonAndNullabilitySymbol"
CODE_MULTIPLE_SPACES_BETWEEN_COLON_AND_NULLABILITY_SYMBOL = (
    "MultipleSpacesBetweenColonAndNullabilitySymbol"
)
CODE_WHITESPACE_AFTER_NULLABILITY_SYMBOL = "WhitespaceAfterNullabilitySymbol"


def _remove(token: Token) -> Fix:
    return Fix(offset=token.offset, length=len(token.content))


class ReturnTypeHintSpacingCheck(Check):
    """Enforce ``): Type`` and ``): ?Type`` spacing."""

    @property
    def name(self) -> str:
        return "return_type_hint_spacing"

    def check(self, buffer: TokenBuffer) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for function_pointer in get_function_pointers(buffer):
            diagnostics.extend(self._check_function(buffer, function_pointer))
        return diagnostics

    def _check_function(self, buffer: TokenBuffer, function_pointer: int) -> list[Diagnostic]:
        if find_return_type_hint(buffer, function_pointer) is None:
            return []
        colon = find_return_colon(buffer, function_pointer)
        if colon is None:
            return []
        hint_start = find_next_effective(buffer, colon + 1)
        if hint_start is None:
            return []

        diagnostics: list[Diagnostic] = []

        before = buffer[colon - 1]
        if before.kind == TokenKind.WHITESPACE:
            diagnostics.append(
                self.diagnostic(
                    buffer,
                    colon,
                    CODE_WHITESPACE_BEFORE_COLON,
                    "There must be no whitespace between closing parenthesis and return type colon.",
                    _remove(before),
                )
            )

        is_nullable = buffer[hint_start].kind == TokenKind.NULLABLE
        if is_nullable:
            no_space_code = CODE_NO_SPACE_BETWEEN_COLON_AND_NULLABILITY_SYMBOL
            multiple_spaces_code = CODE_MULTIPLE_SPACES_BETWEEN_COLON_AND_NULLABILITY_SYMBOL
            message = (
                "There must be exactly one space between return type hint colon "
                "and return type hint nullability symbol."
            )
        else:
            no_space_code = CODE_NO_SPACE_BETWEEN_COLON_AND_TYPE_HINT
            multiple_spaces_code = CODE_MULTIPLE_SPACES_BETWEEN_COLON_AND_TYPE_HINT
            message = "There must be exactly one space between return type hint colon and return type hint."

        after = buffer[colon + 1]
        if after.kind != TokenKind.WHITESPACE:
            diagnostics.append(
                self.diagnostic(
                    buffer,
                    colon,
                    no_space_code,
                    message,
                    Fix(offset=after.offset, length=0, replacement=" "),
                )
            )
        elif after.content != " ":
            diagnostics.append(
                self.diagnostic(
                    buffer,
                    colon,
                    multiple_spaces_code,
                    message,
                    Fix(offset=after.offset, length=len(after.content), replacement=" "),
                )
            )

        if is_nullable and buffer[hint_start + 1].kind == TokenKind.WHITESPACE:
            diagnostics.append(
                self.diagnostic(
                    buffer,
                    hint_start,
                    CODE_WHITESPACE_AFTER_NULLABILITY_SYMBOL,
                    "There must be no whitespace between return type hint nullability symbol "
                    "and return type hint.",
                    _remove(buffer[hint_start + 1]),
                )
            )

        return diagnostics
