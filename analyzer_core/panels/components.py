"""Component list panel renderer."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from analyzer_core.formatting import last_modified_label
from analyzer_core.models import DerivedRow, PanelData
from analyzer_core.panels import panel_from_table


def collect(rows: list[DerivedRow], selected_id: str | None = None) -> PanelData:
    items = [
        {
            "id": row.id,
            "type": row.component_type,
            "name": row.name,
            "status": row.record.status or "N/A",
            "last_modified": last_modified_label(row.record.last_modified),
            "selected": row.id == selected_id,
        }
        for row in rows
    ]
    return PanelData(
        key="components",
        title="Components",
        status="ok" if items else "warn",
        items=items,
        meta={"shown": len(items)},
        errors=[] if items else ["no components match"],
    )


def render(data: PanelData, max_rows: int = 40):
    table = Table(box=None, expand=True)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Name", overflow="fold")
    table.add_column("Status", no_wrap=True)
    table.add_column("Last Modified", justify="right", no_wrap=True)

    if not data.items:
        table.add_row("-", data.errors[0] if data.errors else "No components", "-", "-")
    else:
        for item in data.items[:max_rows]:
            name = escape(str(item.get("name", "")))
            if item.get("selected"):
                name = f"[reverse]{name}[/reverse]"
            table.add_row(
                escape(str(item.get("type", "-"))),
                name,
                escape(str(item.get("status", "N/A"))),
                escape(str(item.get("last_modified", "N/A"))),
            )
        remaining = len(data.items) - max_rows
        if remaining > 0:
            table.add_row("", f"[dim]+{remaining} more[/dim]", "", "")

    return panel_from_table(f"Components ({data.meta.get('shown', 0)})", data.status, table)
