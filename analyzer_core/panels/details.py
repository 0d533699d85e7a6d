"""Selected component details and dependency graph renderers."""

from __future__ import annotations

from typing import Any

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.tree import Tree

from analyzer_core.models import ViewState
from analyzer_core.panels import empty_panel, kv_table

MAX_TREE_NODES = 200


def _add_nodes(tree: Tree, value: Any, budget: list[int]) -> None:
    if budget[0] <= 0:
        return
    if isinstance(value, dict):
        for key, child in value.items():
            budget[0] -= 1
            if isinstance(child, (dict, list)):
                _add_nodes(tree.add(f"[bold]{escape(str(key))}[/bold]"), child, budget)
            else:
                tree.add(f"[bold]{escape(str(key))}[/bold]: {escape(str(child))}")
            if budget[0] <= 0:
                tree.add("[dim]…[/dim]")
                return
    elif isinstance(value, list):
        if not value:
            tree.add("[dim]none[/dim]")
        for child in value:
            budget[0] -= 1
            if isinstance(child, dict) and child.get("name"):
                label = escape(str(child["name"]))
                rest = {k: v for k, v in child.items() if k != "name"}
                _add_nodes(tree.add(label), rest, budget)
            elif isinstance(child, (dict, list)):
                _add_nodes(tree.add("•"), child, budget)
            else:
                tree.add(escape(str(child)))
            if budget[0] <= 0:
                tree.add("[dim]…[/dim]")
                return
    else:
        tree.add(escape(str(value)))


def dependency_tree(graph: Any, root_label: str = "Dependencies") -> Tree:
    tree = Tree(f"[bold]{escape(root_label)}[/bold]")
    if graph is None:
        tree.add("[dim]not loaded[/dim]")
    else:
        _add_nodes(tree, graph, [MAX_TREE_NODES])
    return tree


def render_dependencies(state: ViewState) -> Panel:
    selected = state.selected_component
    label = selected.name if selected is not None else "Dependencies"
    return Panel(dependency_tree(state.dependency_graph, label), title="[bold]Dependencies[/bold]", border_style="cyan")


def render(state: ViewState) -> Panel:
    selected = state.selected_component
    if selected is None:
        if state.dependency_graph is None:
            return empty_panel("Details", "Select a component to inspect it")
        return render_dependencies(state)

    record = selected.record
    rows = [
        ("Type", selected.component_type),
        ("Name", record.name),
        ("Id", record.id),
        ("Status", record.status or "N/A"),
        ("Description", record.description or ""),
        ("Last Modified", record.last_modified or "N/A"),
    ]
    rows.extend((str(key), str(value)) for key, value in record.extra.items())
    body = Group(kv_table(rows), dependency_tree(state.dependency_graph))
    return Panel(body, title=f"[bold]{escape(selected.component_type)}: {escape(record.name)}[/bold]", border_style="cyan")
