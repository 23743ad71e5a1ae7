from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when an ``OBJKIT_*`` environment variable has an invalid value."""


@dataclass(frozen=True)
class ObjkitConfig:
    sort_keys: bool = False
    indent: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> ObjkitConfig:
        """Build a config from ``OBJKIT_*`` environment variables.

        Raises:
            ConfigError: if ``OBJKIT_INDENT`` is not an integer or
                ``OBJKIT_LOG_LEVEL`` is not a known level name.
        """
        raw_indent = os.environ.get("OBJKIT_INDENT", "")
        try:
            indent = int(raw_indent) if raw_indent else None
        except ValueError:
            raise ConfigError(
                f"OBJKIT_INDENT must be an integer, got {raw_indent!r}"
            ) from None

        log_level = os.environ.get("OBJKIT_LOG_LEVEL", "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"OBJKIT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return cls(
            sort_keys=os.environ.get("OBJKIT_SORT_KEYS", "").lower() in ("true", "1", "yes"),
            indent=indent,
            log_level=log_level,
        )
