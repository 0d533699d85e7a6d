"""Component analyzer dashboard entrypoint."""

from __future__ import annotations

import argparse
import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console, Group
from rich.layout import Layout
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from analyzer_core.collectors import env_base_url
from analyzer_core.collectors.client import MetadataClient
from analyzer_core.collectors.components import collect as collect_summary
from analyzer_core.collectors.snapshot import SnapshotProvider
from analyzer_core.commands import CommandError, apply_command
from analyzer_core.controller import ComponentAnalyzer
from analyzer_core.layout import select_layout_mode, visible_row_budget
from analyzer_core.log_config import configure_logging
from analyzer_core.models import CATEGORY_KEYS, FILTER_ALL, TABS
from analyzer_core.panels.components import collect as collect_components
from analyzer_core.panels.components import render as render_components
from analyzer_core.panels.details import render as render_details
from analyzer_core.panels.details import render_dependencies
from analyzer_core.panels.header import render as render_header
from analyzer_core.panels.notices import render as render_notices
from analyzer_core.panels.summary import render as render_summary
from analyzer_core.profiles import resolve_profile


def build_provider(base_url: str | None, snapshot_dir: str | None, timeout_seconds: float | None = None):
    if snapshot_dir:
        return SnapshotProvider(Path(snapshot_dir))
    if base_url:
        return MetadataClient(base_url=base_url, timeout_seconds=timeout_seconds)
    raise ValueError("no metadata source: pass --base-url, --snapshot-dir or set COMPONENT_ANALYZER_URL")


def render_dashboard(analyzer: ComponentAnalyzer, profile: dict, width: int, height: int):
    mode = select_layout_mode(width)
    panels = profile.get("panels", [])
    state = analyzer.state
    rows = analyzer.rows
    counts = analyzer.stats()

    panel_map: dict[str, Panel] = {}
    if "header" in panels:
        panel_map["header"] = render_header(profile["name"], state, counts["total_components"], len(rows), mode)
    if "summary" in panels:
        panel_map["summary"] = render_summary(collect_summary(analyzer.inventory))
    if "components" in panels:
        selected = state.selected_component
        data = collect_components(rows, selected.id if selected is not None else None)
        panel_map["components"] = render_components(data, visible_row_budget(height, mode))
    if "details" in panels:
        if state.selected_tab == "dependencies":
            panel_map["details"] = render_dependencies(state)
        else:
            panel_map["details"] = render_details(state)
    if "notices" in panels:
        panel_map["notices"] = render_notices(list(analyzer.notifier.notices))

    # details replace the list outside the overview tab
    if state.selected_tab != "overview" and "details" in panel_map:
        panel_map.pop("components", None)

    ordered = [panel_map[name] for name in panels if name in panel_map]
    if mode == "narrow" or "header" not in panel_map:
        return Group(*ordered)

    side = [panel_map[name] for name in ("summary", "notices") if name in panel_map]
    main = [panel_map[name] for name in ("components", "details") if name in panel_map]
    if not side or not main:
        return Group(*ordered)

    layout = Layout()
    layout.split_column(
        Layout(panel_map["header"], name="header", size=3),
        Layout(name="body"),
    )
    layout["body"].split_row(
        Layout(Group(*main), name="main", ratio=3),
        Layout(Group(*side), name="side", ratio=1),
    )
    return layout


def json_output(analyzer: ComponentAnalyzer, profile: dict) -> str:
    payload = {
        "profile": profile["name"],
        "collected_at": datetime.now(timezone.utc).isoformat(),
        "state": analyzer.state.to_dict(),
        "stats": analyzer.stats(),
        "rows": [row.to_dict() for row in analyzer.rows],
        "notices": [notice.to_dict() for notice in analyzer.notifier.notices],
    }
    return json.dumps(payload, indent=2, default=str)


def _run_interactive(analyzer: ComponentAnalyzer, profile: dict, console: Console) -> int:
    console.print("Type [bold]help[/bold] for commands.")
    while True:
        console.print(render_dashboard(analyzer, profile, console.size.width, console.size.height))
        try:
            line = Prompt.ask("[bold cyan]analyzer[/bold cyan]", console=console, default="")
        except (EOFError, KeyboardInterrupt):
            return 0
        try:
            reply = apply_command(analyzer, line)
        except (CommandError, ValueError, OSError) as exc:
            console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
            continue
        if reply is None:
            return 0
        if reply:
            console.print(reply, markup=False)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Salesforce component analyzer dashboard")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--base-url", help="Analyzer REST base URL (default: $COMPONENT_ANALYZER_URL)")
    source.add_argument("--snapshot-dir", help="Directory of exported <category>.json lists")
    parser.add_argument(
        "--profile",
        default=os.environ.get("COMPONENT_ANALYZER_PROFILE", "full"),
        help="Profile name: full|compact",
    )
    parser.add_argument("--config", help="Optional JSON config file for panel/profile overrides")
    parser.add_argument("--filter", choices=[FILTER_ALL, *CATEGORY_KEYS], help="Component type filter")
    parser.add_argument("--search", help="Case-insensitive search term")
    parser.add_argument("--select", metavar="ID", help="Load dependencies for a component id")
    parser.add_argument("--tab", choices=TABS, help="Tab to show after loading")
    parser.add_argument("--export", metavar="DIR", help="Write the visible rows as CSV into DIR")
    parser.add_argument("--json", action="store_true", help="Emit JSON payload")
    parser.add_argument("-i", "--interactive", action="store_true", help="Run the command prompt")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    args = parser.parse_args(argv)

    try:
        profile = resolve_profile(args.profile, args.config)
        configure_logging(args.log_level or profile.get("log_level"))
        snapshot_dir = args.snapshot_dir or (None if args.base_url else profile.get("snapshot_dir"))
        base_url = args.base_url or profile.get("base_url") or env_base_url()
        provider = build_provider(base_url, snapshot_dir, profile.get("timeout_seconds"))
        analyzer = ComponentAnalyzer(provider)
        analyzer.set_filter(args.filter or profile.get("filter", FILTER_ALL))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    analyzer.set_search(args.search if args.search is not None else profile.get("search", ""))

    console = Console()
    loaded = analyzer.refresh()
    selected = True
    if loaded and args.select:
        selected = analyzer.select_component(args.select)
    if args.tab:
        analyzer.set_tab(args.tab)

    if args.export and loaded:
        artifact = analyzer.export(Path(args.export))
        if not args.json:
            console.print(f"Exported {len(analyzer.rows)} rows to {Path(args.export) / artifact.filename}")

    if args.json:
        print(json_output(analyzer, profile))
        return 0 if loaded and selected else 1

    if args.interactive:
        return _run_interactive(analyzer, profile, console)

    console.print(render_dashboard(analyzer, profile, console.size.width, console.size.height))
    return 0 if loaded and selected else 1


if __name__ == "__main__":
    raise SystemExit(main())
