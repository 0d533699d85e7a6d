"""Notices panel renderer."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from analyzer_core.notify import Notice
from analyzer_core.panels import panel_from_table

SEVERITY_STYLE = {
    "success": "green",
    "error": "red",
}


def render(notices: list[Notice]):
    table = Table(box=None, expand=True)
    table.add_column("Time", no_wrap=True)
    table.add_column("Notice", overflow="fold")

    if not notices:
        table.add_row("-", "No notices")
    for notice in reversed(notices):
        style = SEVERITY_STYLE.get(notice.severity, "default")
        table.add_row(
            notice.at.strftime("%H:%M:%S"),
            f"[{style}]{escape(notice.title)}[/{style}]: {escape(notice.message)}",
        )

    status = "error" if notices and notices[-1].severity == "error" else "ok"
    return panel_from_table("Notices", status, table)
