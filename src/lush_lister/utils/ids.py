from __future__ import annotations

import time
import uuid


def new_id() -> str:
    return uuid.uuid4().hex


def now_ms() -> int:
    """Current wall-clock time in milliseconds, used in generated file names."""
    return time.time_ns() // 1_000_000
