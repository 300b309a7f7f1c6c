"""Doc comment annotation lookup.

Annotations are returned as raw ``(name, content)`` pairs in source order;
their content is not interpreted.
"""

from __future__ import annotations

import re

from hintsniff.core.models import Annotation
from hintsniff.core.tokens import TokenBuffer, TokenKind

_ANNOTATION_RE = re.compile(r"^(?P<name>@[A-Za-z_][\w\\:-]*)(?:\s+(?P<content>.*?))?\s*$")

_ATTRIBUTE_OPENER = "#["


def find_doc_comment(buffer: TokenBuffer, pointer: int) -> int | None:
    """Doc comment directly preceding the declaration at ``pointer``.

    Whitespace, modifiers (``public static``) and attribute groups between the
    comment and the declaration are skipped.
    """
    i = pointer - 1
    while i >= 0:
        token = buffer[i]
        if token.kind in (TokenKind.WHITESPACE, TokenKind.MODIFIER):
            i -= 1
            continue
        if token.kind == TokenKind.ATTRIBUTE_CLOSER:
            while i >= 0 and buffer[i].content != _ATTRIBUTE_OPENER:
                i -= 1
            i -= 1
            continue
        if token.kind == TokenKind.DOC_COMMENT:
            return i
        return None
    return None


def parse_annotations(comment: str, pointer: int) -> list[Annotation]:
    body = comment.removeprefix("/**").removesuffix("*/")
    annotations: list[Annotation] = []
    for line in body.splitlines():
        line = line.strip().lstrip("*").strip()
        match = _ANNOTATION_RE.match(line)
        if match is None:
            continue
        annotations.append(
            Annotation(name=match.group("name"), content=match.group("content") or None, pointer=pointer)
        )
    return annotations


def get_annotations(buffer: TokenBuffer, pointer: int) -> list[Annotation]:
    doc_comment = find_doc_comment(buffer, pointer)
    if doc_comment is None:
        return []
    return parse_annotations(buffer[doc_comment].content, doc_comment)


def get_annotations_by_name(buffer: TokenBuffer, pointer: int, name: str) -> list[Annotation]:
    """Annotations named ``name`` (e.g. ``@param``) attached to the declaration at ``pointer``."""
    return [annotation for annotation in get_annotations(buffer, pointer) if annotation.name == name]
