"""Function and method signature extraction.

Every helper takes the buffer and the pointer of a ``function`` keyword (a
named declaration or a closure) and derives one fact from the token links and
construct stacks. ``describe_function`` combines them into a
:class:`FunctionDescriptor`.
"""

from __future__ import annotations

from hintsniff.analysis.annotations import get_annotations_by_name
from hintsniff.analysis.control_flow import scan_returns
from hintsniff.analysis.hints import (
    Bounded,
    UnboundedUntil,
    assemble_parameter_hint,
    assemble_return_hint,
)
from hintsniff.analysis.namespaces import (
    CLASS_LIKE_KINDS,
    NAMESPACE_SEPARATOR,
    find_current_namespace_name,
    get_class_name,
)
from hintsniff.analysis.token_utils import find_next, find_next_local, get_pointers_of_kind
from hintsniff.core.models import Annotation, FunctionDescriptor, ParameterDescriptor, TypeHint
from hintsniff.core.tokens import MalformedBufferError, TokenBuffer, TokenKind

FUNCTION_KINDS = frozenset({TokenKind.FUNCTION, TokenKind.CLOSURE})
METHOD_OWNER_KINDS = CLASS_LIKE_KINDS | {TokenKind.ANON_CLASS}

CLOSURE_NAME = "{closure}"
ANONYMOUS_CLASS_NAME = "class@anonymous"


def _parameter_list(buffer: TokenBuffer, function_pointer: int) -> tuple[int, int]:
    token = buffer[function_pointer]
    if token.kind not in FUNCTION_KINDS:
        raise ValueError(f"Token {function_pointer} is {token.kind.value}, not a function")
    if token.parenthesis_opener is None or token.parenthesis_closer is None:
        raise MalformedBufferError(f"Function at line {token.line} has no parameter list")
    return token.parenthesis_opener, token.parenthesis_closer


def get_function_pointers(buffer: TokenBuffer) -> list[int]:
    return get_pointers_of_kind(buffer, FUNCTION_KINDS)


def get_name(buffer: TokenBuffer, function_pointer: int) -> str:
    """First identifier between the keyword and the parameter list."""
    opener, _ = _parameter_list(buffer, function_pointer)
    name_pointer = find_next(buffer, {TokenKind.IDENTIFIER}, function_pointer + 1, opener)
    if name_pointer is None:
        return CLOSURE_NAME
    return buffer[name_pointer].content


def get_fully_qualified_name(buffer: TokenBuffer, function_pointer: int) -> str:
    """Qualified name of the declaration.

    Members of an anonymous class are ``class@anonymous::name``, members of a
    class, interface, trait or enum are ``\\Type::name`` (the type name is the
    unqualified declared name). Free functions are prefixed with their
    namespace when one is declared.
    """
    name = get_name(buffer, function_pointer)

    for frame in buffer.conditions(function_pointer):
        if frame.kind == TokenKind.ANON_CLASS:
            return f"{ANONYMOUS_CLASS_NAME}::{name}"
        if frame.kind in CLASS_LIKE_KINDS:
            return f"{NAMESPACE_SEPARATOR}{get_class_name(buffer, frame.owner)}::{name}"

    namespace = find_current_namespace_name(buffer, function_pointer)
    if namespace is None:
        return name
    return f"{NAMESPACE_SEPARATOR}{namespace}{NAMESPACE_SEPARATOR}{name}"


def is_abstract(buffer: TokenBuffer, function_pointer: int) -> bool:
    return buffer[function_pointer].scope_opener is None


def is_method(buffer: TokenBuffer, function_pointer: int) -> bool:
    return any(frame.kind in METHOD_OWNER_KINDS for frame in buffer.conditions(function_pointer))


def get_parameters_names(buffer: TokenBuffer, function_pointer: int) -> list[str]:
    opener, closer = _parameter_list(buffer, function_pointer)
    return [buffer[i].content for i in get_pointers_of_kind(buffer, {TokenKind.VARIABLE}, opener + 1, closer)]


def get_parameters_type_hints(
    buffer: TokenBuffer, function_pointer: int
) -> dict[str, TypeHint | None]:
    """Parameter name -> hint, in declaration order."""
    opener, closer = _parameter_list(buffer, function_pointer)
    hints: dict[str, TypeHint | None] = {}
    for i in get_pointers_of_kind(buffer, {TokenKind.VARIABLE}, opener + 1, closer):
        hints[buffer[i].content] = assemble_parameter_hint(buffer, i, opener, closer)
    return hints


def get_parameters_without_type_hint(buffer: TokenBuffer, function_pointer: int) -> list[str]:
    return [
        name
        for name, hint in get_parameters_type_hints(buffer, function_pointer).items()
        if hint is None
    ]


def get_parameters(buffer: TokenBuffer, function_pointer: int) -> tuple[ParameterDescriptor, ...]:
    return tuple(
        ParameterDescriptor(name=name, hint=hint)
        for name, hint in get_parameters_type_hints(buffer, function_pointer).items()
    )


def find_return_colon(buffer: TokenBuffer, function_pointer: int) -> int | None:
    """Pointer of the colon introducing the return type hint, if any."""
    _, closer = _parameter_list(buffer, function_pointer)
    token = buffer[function_pointer]
    if token.scope_opener is None:
        return find_next_local(buffer, {TokenKind.COLON}, closer + 1)
    return find_next(buffer, {TokenKind.COLON}, closer + 1, token.scope_opener)


def find_return_type_hint(buffer: TokenBuffer, function_pointer: int) -> TypeHint | None:
    colon = find_return_colon(buffer, function_pointer)
    if colon is None:
        return None

    token = buffer[function_pointer]
    if token.scope_opener is None:
        # No body to bound the scan; run to the end of the declaration.
        boundary = UnboundedUntil(frozenset({TokenKind.SEMICOLON}))
    else:
        boundary = Bounded(token.scope_opener - 1)
    return assemble_return_hint(buffer, colon, boundary)


def has_return_type_hint(buffer: TokenBuffer, function_pointer: int) -> bool:
    return find_return_type_hint(buffer, function_pointer) is not None


def get_parameters_annotations(buffer: TokenBuffer, function_pointer: int) -> list[Annotation]:
    return get_annotations_by_name(buffer, function_pointer, "@param")


def find_return_annotation(buffer: TokenBuffer, function_pointer: int) -> Annotation | None:
    annotations = get_annotations_by_name(buffer, function_pointer, "@return")
    if not annotations:
        return None
    return annotations[0]


def describe_function(buffer: TokenBuffer, function_pointer: int) -> FunctionDescriptor:
    """Build the full descriptor of the declaration at ``function_pointer``."""
    summary = scan_returns(buffer, function_pointer)
    return FunctionDescriptor(
        pointer=function_pointer,
        name=get_name(buffer, function_pointer),
        qualified_name=get_fully_qualified_name(buffer, function_pointer),
        is_method=is_method(buffer, function_pointer),
        is_abstract=is_abstract(buffer, function_pointer),
        parameters=get_parameters(buffer, function_pointer),
        return_hint=find_return_type_hint(buffer, function_pointer),
        returns_value=summary.returns_value,
        returns_void=summary.returns_void,
    )


def describe_functions(buffer: TokenBuffer) -> list[FunctionDescriptor]:
    return [describe_function(buffer, pointer) for pointer in get_function_pointers(buffer)]
