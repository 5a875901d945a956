"""
Domain time utilities (pure).

The machine takes its clock as a dependency; `utc_now` is the default.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

# A clock returns the current instant. Any datetime is accepted; the default is UTC-aware.
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
