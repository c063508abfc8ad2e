"""Common helpers shared across models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def parse_local_timestamp(iso_str: str) -> datetime:
    """Parse an Open-Meteo ISO timestamp such as ``2026-10-19T07:12``.

    With ``timezone=auto`` the provider returns wall-clock times in the
    location's zone without an offset, so the result is left naive.
    """
    return datetime.fromisoformat(iso_str)
