"""Global configuration for hintsniff.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class HintsniffConfig(BaseSettings):
    """hintsniff configuration settings.

    Values can be overridden via environment variables with HINTSNIFF_ prefix.
    Example: HINTSNIFF_ENABLE_VOID_TYPE_HINT=false disables void suggestions.
    List values are given as JSON, e.g. HINTSNIFF_FILE_EXTENSIONS='[".php", ".inc"]'.
    """

    # File discovery
    file_extensions: list[str] = Field(
        default_factory=lambda: [".php"],
        min_length=1,
        description="Extensions of files checked when a directory is given",
    )

    # Checks
    enabled_checks: list[str] = Field(
        default_factory=lambda: ["return_type_hint_spacing", "type_hint_declaration"],
        description="Names of the checks to run",
    )
    enable_void_type_hint: bool = Field(
        default=True,
        description="Suggest and validate the void return type hint",
    )
    ignore_closures: bool = Field(
        default=False,
        description="Skip closures in the type hint declaration check",
    )

    model_config = {
        "env_prefix": "HINTSNIFF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> HintsniffConfig:
    """Get cached configuration instance.

    Returns:
        HintsniffConfig singleton instance.
    """
    return HintsniffConfig()


def reload_config() -> HintsniffConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh HintsniffConfig instance.
    """
    get_config.cache_clear()
    return get_config()
