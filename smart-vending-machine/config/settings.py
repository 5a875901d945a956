"""
Application settings.

Values come from the process environment, optionally seeded from a `.env` file
in the smart-vending-machine directory.

Environment variables (all optional):
- VENDING_MACHINE_ID: identifier used in log lines and API responses (default "vm-001")
- VENDING_CURRENCY: ISO currency code reported by the API (default "USD")
- VENDING_LOG_LEVEL: logging level name (default "INFO")
- VENDING_CORS_ORIGINS: comma-separated list of allowed origins (default "*")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

_DEFAULT_ENV_PATH = Path(__file__).parent.parent / ".env"

_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True, slots=True)
class Settings:
    machine_id: str = "vm-001"
    currency: str = "USD"
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def load_settings(env_path: Optional[Path] = None) -> Settings:
    """
    Load settings from the environment.

    Variables already set in the environment win over the `.env` file.

    Raises:
        RuntimeError: If VENDING_LOG_LEVEL is not a known logging level name
    """

    load_dotenv(dotenv_path=env_path or _DEFAULT_ENV_PATH)

    log_level = os.getenv("VENDING_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _VALID_LOG_LEVELS:
        raise RuntimeError(
            f"Invalid environment variable: VENDING_LOG_LEVEL={log_level!r}. "
            f"Use one of: {', '.join(_VALID_LOG_LEVELS)}."
        )

    return Settings(
        machine_id=os.getenv("VENDING_MACHINE_ID", "vm-001").strip() or "vm-001",
        currency=os.getenv("VENDING_CURRENCY", "USD").strip().upper() or "USD",
        log_level=log_level,
        cors_origins=_parse_origins(os.getenv("VENDING_CORS_ORIGINS", "*")),
    )


__all__ = ["Settings", "load_settings"]
