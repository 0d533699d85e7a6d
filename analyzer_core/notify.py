"""User-facing notices, logged and kept for the notices panel."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone

LOGGER = logging.getLogger("component_analyzer.notify")

SEVERITIES = ("success", "error")


@dataclass(frozen=True)
class Notice:
    title: str
    message: str
    severity: str
    at: datetime

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "message": self.message,
            "severity": self.severity,
            "at": self.at.isoformat(),
        }


class Notifier:
    def __init__(self, history: int = 5) -> None:
        self.notices: deque[Notice] = deque(maxlen=history)

    def notify(self, title: str, message: str, severity: str) -> None:
        if severity not in SEVERITIES:
            raise ValueError(f"unknown notice severity: {severity}")
        self.notices.append(Notice(title, message, severity, datetime.now(timezone.utc)))
        if severity == "error":
            LOGGER.error("%s: %s", title, message)
        else:
            LOGGER.info("%s: %s", title, message)
