"""Namespace and class name lookups."""

from __future__ import annotations

from hintsniff.analysis.token_utils import INEFFECTIVE_KINDS, find_next, find_previous
from hintsniff.core.tokens import TokenBuffer, TokenKind

NAMESPACE_SEPARATOR = "\\"

CLASS_LIKE_KINDS = frozenset(
    {TokenKind.CLASS, TokenKind.INTERFACE, TokenKind.TRAIT, TokenKind.ENUM}
)

_NAME_KINDS = frozenset({TokenKind.IDENTIFIER, TokenKind.NS_SEPARATOR})


def get_namespace_name(buffer: TokenBuffer, namespace_pointer: int) -> str | None:
    """Name declared by the namespace keyword at ``namespace_pointer``."""
    parts: list[str] = []
    for token in buffer.tokens[namespace_pointer + 1 :]:
        if token.kind in INEFFECTIVE_KINDS:
            continue
        if token.kind not in _NAME_KINDS:
            break
        parts.append(token.content)
    name = "".join(parts).strip(NAMESPACE_SEPARATOR)
    return name or None


def find_current_namespace_name(buffer: TokenBuffer, pointer: int) -> str | None:
    """Namespace in effect at ``pointer``, or None for the global namespace."""
    namespace_pointer = find_previous(buffer, {TokenKind.NAMESPACE}, pointer)
    if namespace_pointer is None:
        return None
    return get_namespace_name(buffer, namespace_pointer)


def get_class_name(buffer: TokenBuffer, class_pointer: int) -> str:
    """Declared name of the class-like construct at ``class_pointer``."""
    end = buffer[class_pointer].scope_opener
    name_pointer = find_next(buffer, {TokenKind.IDENTIFIER}, class_pointer + 1, end)
    if name_pointer is None:
        raise ValueError(f"Token {class_pointer} does not declare a named class")
    return buffer[name_pointer].content
