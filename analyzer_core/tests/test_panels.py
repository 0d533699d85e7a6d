from __future__ import annotations

import unittest
from datetime import datetime, timezone
from pathlib import Path
import sys

from rich.console import Console
from rich.tree import Tree

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from analyzer_core.formatting import filter_label, last_modified_label, parse_iso_timestamp  # noqa: E402
from analyzer_core.models import ComponentInventory, ViewState  # noqa: E402
from analyzer_core.notify import Notifier  # noqa: E402
from analyzer_core.panels.components import collect as collect_components  # noqa: E402
from analyzer_core.panels.components import render as render_components  # noqa: E402
from analyzer_core.panels.details import dependency_tree, render as render_details  # noqa: E402
from analyzer_core.panels.notices import render as render_notices  # noqa: E402
from analyzer_core.viewmodel import derive  # noqa: E402


def _rows():
    inventory = ComponentInventory.from_lists(
        {
            "omniscripts": [{"id": "1", "name": "[Draft] Foo", "status": "Draft"}],
            "lwc": [{"id": "2", "name": "Bar", "lastModified": "not a date"}],
        }
    )
    return derive(inventory)


def _text(renderable) -> str:
    console = Console(width=120, record=True)
    console.print(renderable)
    return console.export_text()


class FormattingTests(unittest.TestCase):
    def test_parse_salesforce_offset(self):
        parsed = parse_iso_timestamp("2024-05-01T12:30:00.000+0000")
        self.assertEqual(parsed, datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc))

    def test_last_modified_label(self):
        now = datetime(2024, 5, 3, 12, 30, tzinfo=timezone.utc)
        self.assertEqual(last_modified_label("2024-05-01T12:30:00Z", now), "2d ago")
        self.assertEqual(last_modified_label("yesterday", now), "yesterday")
        self.assertEqual(last_modified_label(None, now), "N/A")

    def test_filter_label(self):
        self.assertEqual(filter_label("all"), "All Components")
        self.assertEqual(filter_label("lwc"), "Lightning Web Components")


class ComponentPanelTests(unittest.TestCase):
    def test_component_table_columns(self):
        panel = render_components(collect_components(_rows()))
        headers = [column.header for column in panel.renderable.columns]
        self.assertEqual(headers, ["Type", "Name", "Status", "Last Modified"])

    def test_names_with_brackets_render_literally(self):
        text = _text(render_components(collect_components(_rows(), selected_id="1")))
        self.assertIn("[Draft] Foo", text)
        self.assertIn("not a date", text)

    def test_backend_text_with_markup_renders_literally(self):
        inventory = ComponentInventory.from_lists(
            {"flows": [{"id": "1", "name": "Foo", "status": "[/bold]", "lastModified": "[/x]"}]}
        )
        text = _text(render_components(collect_components(derive(inventory))))
        self.assertIn("[/bold]", text)
        self.assertIn("[/x]", text)

    def test_row_budget(self):
        panel = render_components(collect_components(_rows()), max_rows=1)
        self.assertIn("+1 more", _text(panel))

    def test_empty_list_shows_reason(self):
        data = collect_components([])
        self.assertEqual(data.status, "warn")
        self.assertIn("no components match", _text(render_components(data)))


class DetailsPanelTests(unittest.TestCase):
    def test_details_without_selection(self):
        self.assertIn("Select a component", _text(render_details(ViewState())))

    def test_details_show_record_and_graph(self):
        row = _rows()[0]
        state = ViewState(selected_tab="details", selected_component=row, dependency_graph={"uses": [{"name": "Extract Account"}]})
        text = _text(render_details(state))
        self.assertIn("Draft", text)
        self.assertIn("Extract Account", text)

    def test_dependency_tree_handles_opaque_values(self):
        tree = dependency_tree(["a", {"b": [1, 2]}, 3])
        self.assertIsInstance(tree, Tree)
        self.assertEqual(len(tree.children), 3)
        self.assertIn("not loaded", _text(dependency_tree(None)))


class NoticePanelTests(unittest.TestCase):
    def test_latest_error_sets_status(self):
        notifier = Notifier()
        notifier.notify("Success", "Components loaded successfully", "success")
        notifier.notify("Error", "Failed to load components: [500]", "error")
        panel = render_notices(list(notifier.notices))
        self.assertEqual(panel.border_style, "red")
        self.assertIn("Failed to load components: [500]", _text(panel))

    def test_unknown_severity(self):
        with self.assertRaises(ValueError):
            Notifier().notify("Hi", "there", "warning")


if __name__ == "__main__":
    unittest.main()
