"""Dashboard controller: owns the inventory, the view state and user actions."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

from analyzer_core.collectors import MetadataError
from analyzer_core.collectors.components import ComponentLoadError, load_all
from analyzer_core.collectors.dependencies import load_dependencies
from analyzer_core.export import ExportArtifact, export_csv, write_artifact
from analyzer_core.models import TABS, ComponentInventory, DerivedRow, ViewState, category_for
from analyzer_core.notify import Notifier
from analyzer_core.viewmodel import derive, find_row, stats, validate_filter


class ComponentAnalyzer:
    """Every mutation here is triggered by an explicit user action.

    Loads are not serialized against each other; whichever finishes last
    decides the inventory and the loading flag.
    """

    def __init__(self, provider: Any, notifier: Notifier | None = None) -> None:
        self.provider = provider
        self.notifier = notifier or Notifier()
        self.inventory = ComponentInventory()
        self.state = ViewState()

    @property
    def rows(self) -> list[DerivedRow]:
        return derive(self.inventory, self.state.filter_type, self.state.search_term)

    def stats(self) -> dict[str, int]:
        return stats(self.inventory)

    def refresh(self) -> bool:
        self.state.is_loading = True
        try:
            inventory = load_all(self.provider)
        except ComponentLoadError as exc:
            self.notifier.notify("Error", f"Failed to load components: {exc}", "error")
            return False
        finally:
            self.state.is_loading = False
        self.inventory = inventory
        self.notifier.notify("Success", "Components loaded successfully", "success")
        return True

    def select_component(self, component_id: str, component_type: str | None = None) -> bool:
        if component_type is None:
            row = find_row(self.rows, component_id)
            component_type = row.component_type if row is not None else ""
        else:
            category = category_for(component_type)
            if category is not None:
                component_type = category.label

        self.state.is_loading = True
        try:
            graph = load_dependencies(self.provider, component_id, component_type)
        except MetadataError as exc:
            self.notifier.notify("Error", f"Failed to load component details: {exc}", "error")
            return False
        finally:
            self.state.is_loading = False

        self.state.dependency_graph = graph
        self.state.selected_component = find_row(self.rows, component_id)
        self.state.selected_tab = "details"
        return True

    def back_to_list(self) -> None:
        self.state.selected_component = None
        self.state.dependency_graph = None
        self.state.selected_tab = "overview"

    def open_dependencies(self) -> None:
        self.set_tab("dependencies")

    def set_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"unknown tab: {tab}")
        self.state.selected_tab = tab
        if tab == "overview":
            self._revalidate_selection()

    def set_search(self, term: str) -> None:
        self.state.search_term = term

    def set_filter(self, filter_type: str) -> None:
        self.state.filter_type = validate_filter(filter_type)

    def export(self, directory: Path | None = None, today: date | None = None) -> ExportArtifact:
        artifact = export_csv(self.rows, today)
        if directory is not None:
            write_artifact(artifact, directory)
        self.notifier.notify("Success", "Component list exported to CSV", "success")
        return artifact

    def _revalidate_selection(self) -> None:
        selected = self.state.selected_component
        if selected is None:
            return
        current = find_row(self.rows, selected.id)
        if current is None:
            self.state.selected_component = None
            self.state.dependency_graph = None
        else:
            self.state.selected_component = current
