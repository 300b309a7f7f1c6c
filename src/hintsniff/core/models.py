"""Descriptor and report models for hintsniff.

Descriptors are derived snapshots of a declaration in a token buffer. They are
frozen, hold no reference into the buffer beyond the pointer they were built
from, and can be shared freely between threads.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class TypeHint(BaseModel):
    """A reconstructed, possibly composite type hint."""

    model_config = {"frozen": True}

    text: str = Field(..., description="Hint text without nullability marker or defaults")
    is_nullable: bool = Field(False, description="A nullability marker precedes the hint")
    is_optional: bool = Field(False, description="Parameter has a default value")


class ParameterDescriptor(BaseModel):
    """A single parameter of a declaration."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Variable name including the sigil")
    hint: TypeHint | None = None


class FunctionDescriptor(BaseModel):
    """Semantic description of a function, method or closure declaration."""

    model_config = {"frozen": True}

    pointer: int = Field(..., description="Index of the declaration keyword token")
    name: str = Field(..., description="Declared name")
    qualified_name: str = Field(..., description="Fully qualified name")
    is_method: bool = False
    is_abstract: bool = False
    parameters: tuple[ParameterDescriptor, ...] = Field(
        default_factory=tuple, description="Parameters in declaration order"
    )
    return_hint: TypeHint | None = None
    returns_value: bool = False
    returns_void: bool = False

    @property
    def has_return_hint(self) -> bool:
        return self.return_hint is not None

    @property
    def parameter_names(self) -> list[str]:
        return [parameter.name for parameter in self.parameters]


class Annotation(BaseModel):
    """A raw doc comment annotation such as ``@param int $a``."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Annotation name including the @ sign")
    content: str | None = Field(None, description="Raw text following the name")
    pointer: int = Field(..., description="Index of the doc comment token")


class Severity(str, Enum):
    """Diagnostic severity."""

    ERROR = "error"
    WARNING = "warning"


class Fix(BaseModel):
    """Replacement of a source span, expressed in character offsets."""

    model_config = {"frozen": True}

    offset: int = Field(..., ge=0)
    length: int = Field(..., ge=0)
    replacement: str = ""


class Diagnostic(BaseModel):
    """A style problem reported by a check."""

    model_config = {"frozen": True}

    check: str = Field(..., description="Name of the reporting check")
    code: str = Field(..., description="Problem code, unique within the check")
    message: str
    line: int
    column: int
    severity: Severity = Severity.ERROR
    fix: Fix | None = None

    @property
    def fixable(self) -> bool:
        return self.fix is not None
