"""Configuration helpers for the Task Board service."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from typing import List


class ConfigError(RuntimeError):
    """Raised when configuration values are missing or invalid."""


@dataclass(slots=True)
class Settings:
    """Runtime configuration for the API and CLI."""

    port: int = 3000
    host: str = "0.0.0.0"
    environment: str = "local"
    id_start: int = 1
    seed_demo: bool = False
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from None


def load_settings() -> Settings:
    """Load settings from environment variables.

    Returns:
        Settings resolved from PORT and the TASK_BOARD_* variables.

    Raises:
        ConfigError: if a value cannot be parsed or is out of range.
    """

    port = _int_from_env("PORT", 3000)
    if not 0 < port < 65536:
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}.")

    id_start = _int_from_env("TASK_BOARD_ID_START", 1)
    if id_start < 1:
        raise ConfigError(f"TASK_BOARD_ID_START must be at least 1, got {id_start}.")

    log_level = os.getenv("TASK_BOARD_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown TASK_BOARD_LOG_LEVEL {log_level!r}.")

    origins_raw = os.getenv("TASK_BOARD_ALLOWED_ORIGINS", "*")
    origins = [origin.strip() for origin in origins_raw.split(",") if origin.strip()]

    return Settings(
        port=port,
        host=os.getenv("TASK_BOARD_HOST", "0.0.0.0").strip() or "0.0.0.0",
        environment=os.getenv("TASK_BOARD_ENV", "local"),
        id_start=id_start,
        seed_demo=os.getenv("TASK_BOARD_SEED_DEMO", "0").strip() == "1",
        allowed_origins=origins or ["*"],
        log_level=log_level,
    )
