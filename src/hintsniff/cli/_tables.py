"""Rich table builders used by the CLI.

Kept separate to keep the command module focused on CLI wiring.
"""

from __future__ import annotations

from rich.table import Table

from hintsniff.core.models import FunctionDescriptor, TypeHint


def _hint_text(hint: TypeHint | None) -> str:
    if hint is None:
        return "[dim]-[/dim]"
    text = f"?{hint.text}" if hint.is_nullable else hint.text
    return f"{text} [dim](optional)[/dim]" if hint.is_optional else text


def build_diagnostics_table(report) -> Table:
    """Build a (Line, Column, Code, Message, Fixable) table for one file report."""
    table = Table(show_header=True, title=str(report.path))
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Code", style="cyan")
    table.add_column("Message")
    table.add_column("Fixable")
    for diagnostic in report.diagnostics:
        table.add_row(
            str(diagnostic.line),
            str(diagnostic.column),
            diagnostic.code,
            diagnostic.message,
            "[green]yes[/green]" if diagnostic.fixable else "no",
        )
    return table


def build_descriptors_table(descriptors: list[FunctionDescriptor], title: str) -> Table:
    """Build the function descriptor listing for `describe`."""
    table = Table(show_header=True, title=title)
    table.add_column("Qualified Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Parameters")
    table.add_column("Return")
    table.add_column("Returns")
    for descriptor in descriptors:
        kind = "method" if descriptor.is_method else "function"
        if descriptor.is_abstract:
            kind = f"abstract {kind}"
        parameters = ", ".join(
            f"{_hint_text(p.hint)} {p.name}" if p.hint else p.name for p in descriptor.parameters
        )
        returns = [
            label
            for flag, label in ((descriptor.returns_value, "value"), (descriptor.returns_void, "void"))
            if flag
        ]
        table.add_row(
            descriptor.qualified_name,
            kind,
            parameters,
            _hint_text(descriptor.return_hint),
            ", ".join(returns) or "[dim]-[/dim]",
        )
    return table
