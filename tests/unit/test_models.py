"""Unit tests for descriptor and report models."""

import pytest
from pydantic import ValidationError

from hintsniff.core.models import (
    Diagnostic,
    Fix,
    FunctionDescriptor,
    ParameterDescriptor,
    Severity,
    TypeHint,
)


class TestDescriptors:
    """Tests for descriptor value types."""

    def test_type_hint_defaults(self) -> None:
        hint = TypeHint(text="int")
        assert not hint.is_nullable
        assert not hint.is_optional

    def test_descriptors_are_frozen(self) -> None:
        hint = TypeHint(text="int")
        with pytest.raises(ValidationError):
            hint.text = "string"

    def test_descriptors_are_hashable(self) -> None:
        parameter = ParameterDescriptor(name="$a", hint=TypeHint(text="int"))
        assert hash(parameter) == hash(ParameterDescriptor(name="$a", hint=TypeHint(text="int")))

    def test_function_descriptor_properties(self) -> None:
        descriptor = FunctionDescriptor(
            pointer=3,
            name="f",
            qualified_name="f",
            parameters=(ParameterDescriptor(name="$a"), ParameterDescriptor(name="$b")),
        )
        assert descriptor.parameter_names == ["$a", "$b"]
        assert not descriptor.has_return_hint
        assert not descriptor.returns_value
        assert not descriptor.returns_void

    def test_json_dump(self) -> None:
        descriptor = FunctionDescriptor(
            pointer=0,
            name="f",
            qualified_name="\\App\\f",
            return_hint=TypeHint(text="string", is_nullable=True),
        )
        data = descriptor.model_dump(mode="json")
        assert data["qualified_name"] == "\\App\\f"
        assert data["parameters"] == []
        assert data["return_hint"] == {"text": "string", "is_nullable": True, "is_optional": False}


class TestDiagnostics:
    """Tests for diagnostics and fixes."""

    def test_fixable(self) -> None:
        diagnostic = Diagnostic(check="c", code="X", message="m", line=1, column=1)
        assert not diagnostic.fixable
        assert diagnostic.severity == Severity.ERROR
        fixed = diagnostic.model_copy(update={"fix": Fix(offset=0, length=1)})
        assert fixed.fixable

    def test_fix_rejects_negative_offset(self) -> None:
        with pytest.raises(ValidationError):
            Fix(offset=-1, length=0)

    def test_severity_serializes_as_value(self) -> None:
        diagnostic = Diagnostic(
            check="c", code="X", message="m", line=1, column=1, severity=Severity.WARNING
        )
        assert diagnostic.model_dump(mode="json")["severity"] == "warning"
