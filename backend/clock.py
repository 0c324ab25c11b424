"""Timestamps, uptime and id generation."""
from __future__ import annotations

import random
import time
import uuid
from datetime import UTC, datetime

# Captured once at import; uptime is measured against it.
_STARTED_AT = time.monotonic()


def iso_timestamp(now: datetime | None = None) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def uptime_seconds() -> float:
    return time.monotonic() - _STARTED_AT


def new_user_id() -> str:
    """``USER-<epoch ms>-<12 hex>``; the suffix keeps same-millisecond ids apart."""
    return f"USER-{time.time_ns() // 1_000_000}-{uuid.uuid4().hex[:12]}"


def new_complaint_id() -> str:
    return f"CMP-{random.randint(100000, 999999)}"
