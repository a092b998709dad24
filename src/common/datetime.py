"""Datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with a trailing Z."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
