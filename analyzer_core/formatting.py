"""Shared text and time formatting helpers for human-facing panels."""

from __future__ import annotations

from datetime import datetime, timezone

from analyzer_core.models import CATEGORY_BY_KEY, FILTER_ALL


def filter_label(filter_type: str) -> str:
    if filter_type == FILTER_ALL:
        return "All Components"
    category = CATEGORY_BY_KEY.get(filter_type)
    return category.option_label if category else filter_type


def compact_relative_age(age_seconds: float | int | None) -> str:
    if age_seconds is None:
        return "n/a"

    seconds = max(0, int(age_seconds))
    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"


def parse_iso_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    # Salesforce sends offsets without a colon, e.g. +0000.
    if len(text) > 5 and text[-5] in "+-" and text[-4:].isdigit():
        text = f"{text[:-2]}:{text[-2:]}"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def last_modified_label(value: str | None, now: datetime | None = None) -> str:
    """Relative age for ISO timestamps, the raw text otherwise."""
    if not value:
        return "N/A"
    parsed = parse_iso_timestamp(value)
    if parsed is None:
        return value
    now = now or datetime.now(timezone.utc)
    return compact_relative_age((now - parsed).total_seconds())

