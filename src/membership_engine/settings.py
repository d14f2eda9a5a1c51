from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    # Day count used when a payment type is unknown or a session pack has no duration
    fallback_duration_days: int = 30
    section_catalog_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            fallback_duration_days=int(os.getenv("FALLBACK_DURATION_DAYS", cls.fallback_duration_days)),
            section_catalog_path=os.getenv("SECTION_CATALOG_PATH") or None,
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
