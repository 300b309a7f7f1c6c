"""Presence and consistency of parameter and return type hints.

A parameter or return value must be described either by a native type hint
or by a doc comment annotation. The ``void`` hint and ``@return void``
annotation are checked against the return statements of the body.
"""

from __future__ import annotations

import re

from hintsniff.analysis.functions import (
    describe_function,
    find_return_annotation,
    get_function_pointers,
    get_parameters_annotations,
)
from hintsniff.analysis.token_utils import find_previous_effective
from hintsniff.checks.base import Check, describe_label
from hintsniff.core.config import HintsniffConfig
from hintsniff.core.models import Annotation, Diagnostic, Fix, FunctionDescriptor
from hintsniff.core.tokens import TokenBuffer, TokenKind

CODE_MISSING_PARAMETER_TYPE_HINT = "MissingParameterTypeHint"
CODE_MISSING_RETURN_TYPE_HINT = "MissingReturnTypeHint"
CODE_INCORRECT_VOID_RETURN_TYPE_HINT = "IncorrectVoidReturnTypeHint"
CODE_INCORRECT_RETURN_ANNOTATION = "IncorrectReturnAnnotation"

# Magic methods that never declare a return type.
_NO_RETURN_HINT_METHODS = frozenset({"__construct", "__destruct", "__clone"})

_VOID = "void"


def _annotates_parameter(annotation: Annotation, parameter_name: str) -> bool:
    if annotation.content is None:
        return False
    pattern = rf"(?:^|\s)(?:&)?(?:\.\.\.)?{re.escape(parameter_name)}(?:\s|$)"
    return re.search(pattern, annotation.content) is not None


def _is_void_annotation(annotation: Annotation) -> bool:
    return annotation.content is not None and annotation.content.split()[0].lower() == _VOID


class TypeHintDeclarationCheck(Check):
    """Report missing type hints and contradictory ``void`` declarations."""

    def __init__(self, config: HintsniffConfig) -> None:
        self._config = config

    @property
    def name(self) -> str:
        return "type_hint_declaration"

    def check(self, buffer: TokenBuffer) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for function_pointer in get_function_pointers(buffer):
            if self._config.ignore_closures and buffer[function_pointer].kind == TokenKind.CLOSURE:
                continue
            descriptor = describe_function(buffer, function_pointer)
            diagnostics.extend(self._check_parameters(buffer, descriptor))
            diagnostics.extend(self._check_return(buffer, descriptor))
        return diagnostics

    def _check_parameters(
        self, buffer: TokenBuffer, descriptor: FunctionDescriptor
    ) -> list[Diagnostic]:
        annotations = get_parameters_annotations(buffer, descriptor.pointer)
        diagnostics: list[Diagnostic] = []
        for parameter in descriptor.parameters:
            if parameter.hint is not None:
                continue
            if any(_annotates_parameter(a, parameter.name) for a in annotations):
                continue
            diagnostics.append(
                self.diagnostic(
                    buffer,
                    descriptor.pointer,
                    CODE_MISSING_PARAMETER_TYPE_HINT,
                    f"{describe_label(descriptor)} does not have parameter type hint "
                    f"nor @param annotation for its parameter {parameter.name}.",
                )
            )
        return diagnostics

    def _check_return(
        self, buffer: TokenBuffer, descriptor: FunctionDescriptor
    ) -> list[Diagnostic]:
        if descriptor.name.lower() in _NO_RETURN_HINT_METHODS:
            return []

        annotation = find_return_annotation(buffer, descriptor.pointer)
        hint = descriptor.return_hint

        if hint is not None:
            if (
                self._config.enable_void_type_hint
                and hint.text.lower() == _VOID
                and descriptor.returns_value
            ):
                return [
                    self.diagnostic(
                        buffer,
                        descriptor.pointer,
                        CODE_INCORRECT_VOID_RETURN_TYPE_HINT,
                        f"{describe_label(descriptor)} has void return type hint "
                        "but returns a value.",
                    )
                ]
            return []

        if annotation is not None:
            if _is_void_annotation(annotation) and descriptor.returns_value:
                return [
                    self.diagnostic(
                        buffer,
                        annotation.pointer,
                        CODE_INCORRECT_RETURN_ANNOTATION,
                        f"{describe_label(descriptor)} has @return void annotation "
                        "but returns a value.",
                    )
                ]
            return []

        if (
            self._config.enable_void_type_hint
            and not descriptor.is_abstract
            and not descriptor.returns_value
        ):
            return [
                self.diagnostic(
                    buffer,
                    descriptor.pointer,
                    CODE_MISSING_RETURN_TYPE_HINT,
                    f"{describe_label(descriptor)} does not have void return type hint.",
                    self._void_fix(buffer, descriptor),
                )
            ]

        return [
            self.diagnostic(
                buffer,
                descriptor.pointer,
                CODE_MISSING_RETURN_TYPE_HINT,
                f"{describe_label(descriptor)} does not have return type hint "
                "nor @return annotation for its return value.",
            )
        ]

    @staticmethod
    def _void_fix(buffer: TokenBuffer, descriptor: FunctionDescriptor) -> Fix | None:
        scope_opener = buffer[descriptor.pointer].scope_opener
        if scope_opener is None:
            return None
        last = find_previous_effective(buffer, scope_opener - 1)
        if last is None:
            return None
        end = buffer[last].offset + len(buffer[last].content)
        return Fix(offset=end, length=0, replacement=f": {_VOID}")
