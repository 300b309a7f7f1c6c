"""Check registry and orchestration."""

from __future__ import annotations

import logging
from collections.abc import Callable

from hintsniff.checks.base import Check
from hintsniff.checks.return_type_hint_spacing import ReturnTypeHintSpacingCheck
from hintsniff.checks.type_hint_declaration import TypeHintDeclarationCheck
from hintsniff.core.config import HintsniffConfig, get_config
from hintsniff.core.models import Diagnostic
from hintsniff.core.tokens import TokenBuffer

logger = logging.getLogger(__name__)

CHECK_FACTORIES: dict[str, Callable[[HintsniffConfig], Check]] = {
    "return_type_hint_spacing": lambda config: ReturnTypeHintSpacingCheck(),
    "type_hint_declaration": TypeHintDeclarationCheck,
}


def get_default_checks(config: HintsniffConfig | None = None) -> list[Check]:
    """Return the built-in checks enabled in the configuration."""
    config = config or get_config()
    checks: list[Check] = []
    for name in config.enabled_checks:
        factory = CHECK_FACTORIES.get(name)
        if factory is None:
            logger.warning(f"Unknown check {name!r} ignored")
            continue
        checks.append(factory(config))
    return checks


def run_checks(buffer: TokenBuffer, checks: list[Check]) -> tuple[list[Diagnostic], list[str]]:
    """Run checks over a buffer and return diagnostics plus any error messages."""
    diagnostics: list[Diagnostic] = []
    errors: list[str] = []
    for check in checks:
        try:
            found = check.check(buffer)
        except Exception as exc:
            logger.warning(f"Check {check.name} failed: {exc}")
            errors.append(f"{check.name}: {exc}")
            continue
        logger.debug(f"{check.name}: {len(found)} diagnostic(s)")
        diagnostics.extend(found)
    diagnostics.sort(key=lambda d: (d.line, d.column, d.check, d.code))
    return diagnostics, errors
