"""Base interface for checks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hintsniff.analysis.functions import CLOSURE_NAME
from hintsniff.core.models import Diagnostic, Fix, FunctionDescriptor, Severity
from hintsniff.core.tokens import TokenBuffer


class Check(ABC):
    """Inspect a token buffer and report style problems."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique check name."""

    @abstractmethod
    def check(self, buffer: TokenBuffer) -> list[Diagnostic]:
        """Return diagnostics for the buffer, in source order."""

    def diagnostic(
        self,
        buffer: TokenBuffer,
        pointer: int,
        code: str,
        message: str,
        fix: Fix | None = None,
        severity: Severity = Severity.ERROR,
    ) -> Diagnostic:
        token = buffer[pointer]
        return Diagnostic(
            check=self.name,
            code=code,
            message=message,
            line=token.line,
            column=token.column,
            severity=severity,
            fix=fix,
        )


def describe_label(descriptor: FunctionDescriptor) -> str:
    """Human readable name used in messages, e.g. ``Method \\Foo::bar()``."""
    if descriptor.name == CLOSURE_NAME:
        return "Closure"
    if descriptor.is_method:
        return f"Method {descriptor.qualified_name}()"
    return f"Function {descriptor.qualified_name}()"
