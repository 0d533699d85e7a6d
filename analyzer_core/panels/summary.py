"""Summary (per-category counts) panel renderer."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from analyzer_core.models import CATEGORY_BY_KEY, PanelData
from analyzer_core.panels import error_suffix, panel_from_table


def render(data: PanelData):
    table = Table(box=None, expand=True)
    table.add_column("Category", no_wrap=True)
    table.add_column("Count", justify="right", no_wrap=True)

    for item in data.items:
        category = CATEGORY_BY_KEY.get(item.get("category", ""))
        label = category.option_label if category else str(item.get("category", "-"))
        table.add_row(label, str(item.get("count", 0)))
    table.add_row("[bold]Total[/bold]", f"[bold]{data.meta.get('total_components', 0)}[/bold]")

    return panel_from_table(f"Summary{escape(error_suffix(data))}", data.status, table)
