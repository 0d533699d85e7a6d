"""Header renderer."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel

from analyzer_core.formatting import filter_label
from analyzer_core.models import ViewState


def render(profile_name: str, state: ViewState, total: int, shown: int, layout_mode: str) -> Panel:
    search = escape(state.search_term) or "-"
    loading = "  [yellow]loading…[/yellow]" if state.is_loading else ""
    text = (
        f"Profile: [bold]{profile_name}[/bold]   "
        f"Components: [bold]{shown}/{total}[/bold]   "
        f"Filter: [bold]{filter_label(state.filter_type)}[/bold]   "
        f"Search: [bold]{search}[/bold]   "
        f"Tab: [bold]{state.selected_tab}[/bold]   "
        f"Layout: [bold]{layout_mode}[/bold]{loading}"
    )
    return Panel(text, title="[bold]Component Analyzer[/bold]", border_style="cyan")
