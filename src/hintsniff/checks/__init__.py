"""Style checks consuming function descriptors.

Checks run over a linked token buffer and report diagnostics, most of them
with a fix that can be applied back to the source.
"""

from hintsniff.checks.base import Check
from hintsniff.checks.fixer import apply_fixes
from hintsniff.checks.registry import get_default_checks, run_checks
from hintsniff.checks.return_type_hint_spacing import ReturnTypeHintSpacingCheck
from hintsniff.checks.type_hint_declaration import TypeHintDeclarationCheck

__all__ = [
    "Check",
    "ReturnTypeHintSpacingCheck",
    "TypeHintDeclarationCheck",
    "apply_fixes",
    "get_default_checks",
    "run_checks",
]
