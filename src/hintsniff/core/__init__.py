"""Core module containing token buffer, descriptor models and configuration."""

from hintsniff.core.models import (
    Annotation,
    Diagnostic,
    Fix,
    FunctionDescriptor,
    ParameterDescriptor,
    Severity,
    TypeHint,
)
from hintsniff.core.tokens import (
    Frame,
    MalformedBufferError,
    Token,
    TokenBuffer,
    TokenKind,
)

__all__ = [
    "Annotation",
    "Diagnostic",
    "Fix",
    "Frame",
    "FunctionDescriptor",
    "MalformedBufferError",
    "ParameterDescriptor",
    "Severity",
    "Token",
    "TokenBuffer",
    "TokenKind",
    "TypeHint",
]
