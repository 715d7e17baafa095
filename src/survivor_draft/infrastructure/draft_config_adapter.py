"""
Draft Configuration Adapter

Runtime settings read from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _env_flag(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DraftConfiguration:
    """Settings for stores, roster source, rules and logging"""
    data_dir: str = "data"
    storage: str = "json"  # "json" or "memory"
    default_season_id: str = "48"
    roster_url: str = ""
    enforce_turns: bool = True
    allow_empty_queue_lock: bool = False
    log_level: str = "INFO"
    log_file: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DraftConfiguration":
        """Get configuration from environment variables"""
        env = os.environ if environ is None else environ
        storage = env.get("SURVIVOR_DRAFT_STORAGE", "json").strip().lower()
        if storage not in ("json", "memory"):
            raise ValueError(f"Unknown storage backend: {storage}")
        return cls(
            data_dir=env.get("SURVIVOR_DRAFT_DATA_DIR", "data"),
            storage=storage,
            default_season_id=env.get("SURVIVOR_DRAFT_SEASON", "48"),
            roster_url=env.get("SURVIVOR_DRAFT_ROSTER_URL", ""),
            enforce_turns=_env_flag(env.get("SURVIVOR_DRAFT_ENFORCE_TURNS"), True),
            allow_empty_queue_lock=_env_flag(env.get("SURVIVOR_DRAFT_ALLOW_EMPTY_LOCK"), False),
            log_level=env.get("SURVIVOR_DRAFT_LOG_LEVEL", "INFO").upper(),
            log_file=env.get("SURVIVOR_DRAFT_LOG_FILE", ""),
        )
