"""Interactive command parsing for the analyzer prompt."""

from __future__ import annotations

import shlex
from pathlib import Path

from analyzer_core.controller import ComponentAnalyzer
from analyzer_core.viewmodel import component_type_options

HELP_TEXT = """\
search <text>          filter rows by name, description or type (no text clears)
filter <key>           all | omniscripts | dataraptors | integrationProcedures | flexcards | lwc | flows
select <id> [type]     load dependencies for a component and open its details
back                   return to the component list
deps                   show the dependency tab
tab <name>             overview | details | dependencies
refresh                reload every category
export [dir]           write the visible rows as CSV (default: current directory)
filters                list filter options
help                   show this text
quit                   leave the prompt"""


class CommandError(ValueError):
    """Raised for commands the prompt cannot apply."""


def apply_command(analyzer: ComponentAnalyzer, line: str) -> str | None:
    """Apply one prompt line; returns text to show, or None to stop."""
    try:
        parts = shlex.split(line)
    except ValueError as exc:
        raise CommandError(str(exc)) from exc
    if not parts:
        return ""

    command, args = parts[0].lower(), parts[1:]
    if command in ("quit", "exit", "q"):
        return None
    if command == "help":
        return HELP_TEXT
    if command == "filters":
        return "\n".join(f"{value:<24}{label}" for label, value in component_type_options())
    if command == "search":
        analyzer.set_search(" ".join(args))
        return ""
    if command == "filter":
        if len(args) != 1:
            raise CommandError("usage: filter <key>")
        analyzer.set_filter(args[0])
        return ""
    if command == "select":
        if not args or len(args) > 2:
            raise CommandError("usage: select <id> [type]")
        analyzer.select_component(args[0], args[1] if len(args) == 2 else None)
        return ""
    if command == "back":
        analyzer.back_to_list()
        return ""
    if command == "deps":
        analyzer.open_dependencies()
        return ""
    if command == "tab":
        if len(args) != 1:
            raise CommandError("usage: tab <name>")
        analyzer.set_tab(args[0])
        return ""
    if command == "refresh":
        analyzer.refresh()
        return ""
    if command == "export":
        directory = Path(args[0]) if args else Path.cwd()
        artifact = analyzer.export(directory)
        return f"wrote {directory / artifact.filename}"
    raise CommandError(f"unknown command: {command} (try 'help')")
