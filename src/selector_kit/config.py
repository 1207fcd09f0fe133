from __future__ import annotations

import logging
import os
from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when a configuration value is malformed."""

    def __init__(self, message: str, *, variable: str | None = None) -> None:
        super().__init__(message)
        self.variable = variable


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _env_indent(value: str) -> int | None:
    if not value.strip():
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(
            f"SELECTOR_KIT_JSON_INDENT must be an integer, got {value!r}",
            variable="SELECTOR_KIT_JSON_INDENT",
        ) from exc


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    strict_json: bool = False
    json_indent: int | None = None

    def __post_init__(self) -> None:
        if self.log_level not in logging.getLevelNamesMapping():
            raise ConfigError(
                f"Unknown log level {self.log_level!r}",
                variable="SELECTOR_KIT_LOG_LEVEL",
            )
        if self.json_indent is not None and self.json_indent < 0:
            raise ConfigError(
                f"JSON indent must not be negative, got {self.json_indent}",
                variable="SELECTOR_KIT_JSON_INDENT",
            )

    @classmethod
    def from_env(cls) -> SelectorKitConfig:
        """Read overrides from ``SELECTOR_KIT_*`` environment variables.

        Malformed values raise ConfigError.
        """
        return cls(
            log_level=os.environ.get("SELECTOR_KIT_LOG_LEVEL", cls.log_level).strip().upper(),
            strict_json=_env_bool(os.environ.get("SELECTOR_KIT_STRICT_JSON", "")),
            json_indent=_env_indent(os.environ.get("SELECTOR_KIT_JSON_INDENT", "")),
        )
