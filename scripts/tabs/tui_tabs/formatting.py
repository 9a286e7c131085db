"""Shared text and time formatting helpers for human-facing panels."""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone

TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+\-]\d{2}:\d{2})?")


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


def display_time(value: str | None) -> str:
    """HH:MM:SS in UTC for an ISO-8601 stamp, "n/a" when missing or unparseable."""
    text = (value or "").strip()
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    try:
        stamp = datetime.fromisoformat(text)
    except ValueError:
        return "n/a"
    if stamp.tzinfo is not None:
        stamp = stamp.astimezone(timezone.utc)
    return f"{stamp:%H:%M:%S}"


def split_log_line(line: str) -> tuple[str | None, str]:
    """Return (timestamp, message) for a plain or JSON log line."""
    line = line.strip()
    if not line:
        return None, ""

    if line.startswith("{") and line.endswith("}"):
        try:
            payload = json.loads(line)
        except json.JSONDecodeError:
            payload = None
        if isinstance(payload, dict):
            ts = payload.get("ts") or payload.get("timestamp") or payload.get("time")
            msg = payload.get("message") or payload.get("msg") or payload.get("event") or ""
            return (str(ts) if ts else None), str(msg).strip() or "event"

    match = TIMESTAMP_RE.search(line)
    if not match:
        return None, line

    left = line[: match.start()].strip()
    right = line[match.end() :].strip()
    text = f"{left} {right}".strip() if left and right else (left or right or line)
    text = re.sub(r"^\[\s*\]\s*", "", text)
    text = re.sub(r"\s{2,}", " ", text).strip()
    return match.group(0), text
