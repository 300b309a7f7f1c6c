"""Unit tests for type hint assembly."""

from hintsniff.analysis.hints import (
    BACKWARD,
    FORWARD,
    Bounded,
    UnboundedUntil,
    assemble_hint,
    assemble_parameter_hint,
    assemble_return_hint,
    is_optional_parameter,
)
from hintsniff.analysis.token_utils import INEFFECTIVE_KINDS
from hintsniff.core.models import TypeHint
from hintsniff.core.tokens import TokenBuffer, TokenKind


def _parameter_hint(buffer, pointer_of, nth=0):
    function = buffer[pointer_of(buffer, TokenKind.FUNCTION)]
    variable = pointer_of(buffer, TokenKind.VARIABLE, nth)
    return assemble_parameter_hint(
        buffer, variable, function.parenthesis_opener, function.parenthesis_closer
    )


class TestParameterHints:
    """Tests for the backward scan from a parameter variable."""

    def test_simple_hint(self, synth, pointer_of) -> None:
        buffer = synth("function f(int $a) {}")
        assert _parameter_hint(buffer, pointer_of) == TypeHint(text="int")

    def test_missing_hint(self, synth, pointer_of) -> None:
        buffer = synth("function f($a) {}")
        assert _parameter_hint(buffer, pointer_of) is None

    def test_namespaced_hint_keeps_reading_order(self, synth, pointer_of) -> None:
        buffer = synth(r"function f(\App\Model\User $user) {}")
        assert _parameter_hint(buffer, pointer_of).text == r"\App\Model\User"

    def test_union_hint(self, synth, pointer_of) -> None:
        buffer = synth("function f(int|string $a) {}")
        assert _parameter_hint(buffer, pointer_of).text == "int|string"

    def test_nullable_marker_excluded(self, synth, pointer_of) -> None:
        buffer = synth("function f(?  Foo $a) {}")
        assert _parameter_hint(buffer, pointer_of) == TypeHint(text="Foo", is_nullable=True)

    def test_reference_and_variadic_markers_excluded(self, synth, pointer_of) -> None:
        buffer = synth("function f(array &$a, string ...$rest) {}")
        assert _parameter_hint(buffer, pointer_of, 0).text == "array"
        assert _parameter_hint(buffer, pointer_of, 1).text == "string"

    def test_default_value_marks_optional(self, synth, pointer_of) -> None:
        buffer = synth("function f(int $a = 5, $b = 1) {}")
        assert _parameter_hint(buffer, pointer_of, 0) == TypeHint(text="int", is_optional=True)
        assert _parameter_hint(buffer, pointer_of, 1) is None

    def test_second_parameter_stops_at_comma(self, synth, pointer_of) -> None:
        buffer = synth("function f(int $a, $b) {}")
        assert _parameter_hint(buffer, pointer_of, 1) is None

    def test_comments_are_skipped(self, synth, pointer_of) -> None:
        buffer = synth("function f(int /* count */ $a) {}")
        assert _parameter_hint(buffer, pointer_of).text == "int"

    def test_promoted_property_stops_at_modifier(self, synth, pointer_of) -> None:
        buffer = synth("class A { function __construct(private ?Foo $foo) {} }")
        assert _parameter_hint(buffer, pointer_of) == TypeHint(text="Foo", is_nullable=True)

    def test_dnf_hint_keeps_grouping(self, pointer_of) -> None:
        K = TokenKind
        buffer = TokenBuffer.link(
            [
                (K.FUNCTION, "function"),
                (K.WHITESPACE, " "),
                (K.IDENTIFIER, "f"),
                (K.OPEN_PARENTHESIS, "("),
                (K.OPEN_PARENTHESIS, "("),
                (K.IDENTIFIER, "A"),
                (K.TYPE_INTERSECTION, "&"),
                (K.IDENTIFIER, "B"),
                (K.CLOSE_PARENTHESIS, ")"),
                (K.BITWISE_OR, "|"),
                (K.IDENTIFIER, "null"),
                (K.WHITESPACE, " "),
                (K.VARIABLE, "$x"),
                (K.COMMA, ","),
                (K.WHITESPACE, " "),
                (K.IDENTIFIER, "int"),
                (K.WHITESPACE, " "),
                (K.VARIABLE, "$y"),
                (K.CLOSE_PARENTHESIS, ")"),
                (K.WHITESPACE, " "),
                (K.OPEN_CURLY_BRACKET, "{"),
                (K.CLOSE_CURLY_BRACKET, "}"),
            ]
        )
        assert _parameter_hint(buffer, pointer_of, 0) == TypeHint(text="(A&B)|null")
        assert _parameter_hint(buffer, pointer_of, 1) == TypeHint(text="int")

    def test_is_optional_parameter(self, synth, pointer_of) -> None:
        buffer = synth("function f($a = [], $b) {}")
        closer = buffer[pointer_of(buffer, TokenKind.FUNCTION)].parenthesis_closer
        assert is_optional_parameter(buffer, pointer_of(buffer, TokenKind.VARIABLE, 0), closer)
        assert not is_optional_parameter(buffer, pointer_of(buffer, TokenKind.VARIABLE, 1), closer)


class TestReturnHints:
    """Tests for the forward scan from the return type colon."""

    def test_bounded_by_body(self, synth, pointer_of) -> None:
        buffer = synth("function f(): ?string {}")
        colon = pointer_of(buffer, TokenKind.COLON)
        body = buffer[pointer_of(buffer, TokenKind.FUNCTION)].scope_opener
        hint = assemble_return_hint(buffer, colon, Bounded(body - 1))
        assert hint == TypeHint(text="string", is_nullable=True)

    def test_unbounded_until_terminator(self, synth, pointer_of) -> None:
        buffer = synth(r"function f(): \Foo\Bar ;")
        colon = pointer_of(buffer, TokenKind.COLON)
        hint = assemble_return_hint(buffer, colon, UnboundedUntil(frozenset({TokenKind.SEMICOLON})))
        assert hint == TypeHint(text=r"\Foo\Bar")

    def test_empty_range_is_none(self, synth, pointer_of) -> None:
        buffer = synth("function f(): {}")
        colon = pointer_of(buffer, TokenKind.COLON)
        body = buffer[pointer_of(buffer, TokenKind.FUNCTION)].scope_opener
        assert assemble_return_hint(buffer, colon, Bounded(body - 1)) is None

    def test_bound_is_inclusive(self, synth, pointer_of) -> None:
        buffer = synth("function f(): int|null {}")
        colon = pointer_of(buffer, TokenKind.COLON)
        # Stop right after `int`.
        hint = assemble_return_hint(buffer, colon, Bounded(colon + 2))
        assert hint.text == "int"


class TestAssembleHint:
    """Tests for the shared scanning routine."""

    def test_directions_agree_on_text(self, synth) -> None:
        buffer = synth(r"\A\B\C")
        last = len(buffer) - 1
        forward = assemble_hint(buffer, 0, Bounded(last), FORWARD, INEFFECTIVE_KINDS, ())
        backward = assemble_hint(buffer, last, Bounded(0), BACKWARD, INEFFECTIVE_KINDS, ())
        assert forward == backward == TypeHint(text=r"\A\B\C")

    def test_start_outside_buffer(self, synth) -> None:
        buffer = synth("int")
        assert assemble_hint(buffer, 5, Bounded(10), FORWARD, INEFFECTIVE_KINDS, ()) is None

    def test_only_nullable_marker_is_none(self, synth) -> None:
        buffer = synth("? ;")
        hint = assemble_hint(
            buffer, 0, UnboundedUntil(frozenset({TokenKind.SEMICOLON})), FORWARD, INEFFECTIVE_KINDS, ()
        )
        assert hint is None
