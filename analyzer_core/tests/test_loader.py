from __future__ import annotations

import threading
import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from analyzer_core.collectors import MetadataError  # noqa: E402
from analyzer_core.collectors.components import ComponentLoadError, collect, load_all  # noqa: E402
from analyzer_core.controller import ComponentAnalyzer  # noqa: E402
from analyzer_core.models import CATEGORY_KEYS  # noqa: E402


class FakeProvider:
    def __init__(self, lists=None, fail=None, barrier=None):
        self.lists = lists or {}
        self.fail = fail or {}
        self.barrier = barrier
        self.loading_seen: list[bool] = []
        self.analyzer = None

    def _fetch(self, key):
        if self.analyzer is not None:
            self.loading_seen.append(self.analyzer.state.is_loading)
        if self.barrier is not None:
            self.barrier.wait()
        if key in self.fail:
            raise MetadataError(self.fail[key])
        return self.lists.get(key)

    def get_omni_scripts(self):
        return self._fetch("omniscripts")

    def get_data_raptors(self):
        return self._fetch("dataraptors")

    def get_integration_procedures(self):
        return self._fetch("integrationProcedures")

    def get_flex_cards(self):
        return self._fetch("flexcards")

    def get_lightning_web_components(self):
        return self._fetch("lwc")

    def get_flows(self):
        return self._fetch("flows")

    def get_component_dependencies(self, component_id, component_type):
        raise MetadataError("not used")


LISTS = {
    "omniscripts": [{"id": "1", "name": "Foo"}],
    "lwc": [{"id": "2", "name": "Bar"}],
}


class LoadAllTests(unittest.TestCase):
    def test_fetches_run_concurrently(self):
        # Six parties must meet at the barrier, which only happens when every fetch is in flight at once.
        barrier = threading.Barrier(len(CATEGORY_KEYS), timeout=5)
        inventory = load_all(FakeProvider(LISTS, barrier=barrier))
        self.assertEqual(inventory.get("omniscripts")[0].name, "Foo")
        self.assertEqual(inventory.get("lwc")[0].name, "Bar")

    def test_none_responses_default_to_empty_lists(self):
        inventory = load_all(FakeProvider(LISTS))
        self.assertEqual(set(inventory.records), set(CATEGORY_KEYS))
        self.assertEqual(inventory.get("flows"), [])
        self.assertEqual(inventory.get("dataraptors"), [])

    def test_any_failure_fails_whole_load(self):
        with self.assertRaises(ComponentLoadError) as ctx:
            load_all(FakeProvider(LISTS, fail={"flexcards": "Insufficient access to OmniUiCard"}))
        self.assertEqual(str(ctx.exception), "Insufficient access to OmniUiCard")

    def test_unexpected_exception_is_wrapped(self):
        class Broken(FakeProvider):
            def get_flows(self):
                raise RuntimeError("boom")

        with self.assertRaises(ComponentLoadError) as ctx:
            load_all(Broken(LISTS))
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_summary_collect(self):
        data = collect(load_all(FakeProvider(LISTS)))
        self.assertEqual(data.meta["total_components"], 2)
        self.assertEqual(data.status, "ok")
        self.assertEqual([item["category"] for item in data.items], list(CATEGORY_KEYS))


class RefreshTests(unittest.TestCase):
    def test_success_replaces_inventory_and_notifies(self):
        provider = FakeProvider(LISTS)
        analyzer = ComponentAnalyzer(provider)
        provider.analyzer = analyzer

        self.assertTrue(analyzer.refresh())
        self.assertEqual(analyzer.stats()["total_components"], 2)
        self.assertFalse(analyzer.state.is_loading)
        self.assertTrue(provider.loading_seen)
        self.assertTrue(all(provider.loading_seen))
        notice = analyzer.notifier.notices[-1]
        self.assertEqual((notice.title, notice.message, notice.severity), ("Success", "Components loaded successfully", "success"))

    def test_failure_keeps_previous_inventory(self):
        provider = FakeProvider(LISTS)
        analyzer = ComponentAnalyzer(provider)
        analyzer.refresh()
        before_inventory = analyzer.inventory
        before = before_inventory.to_dict()
        notices_before = len(analyzer.notifier.notices)

        provider.lists = {"omniscripts": [{"id": "9", "name": "Other"}]}
        provider.fail = {"dataraptors": "Read timed out"}
        self.assertFalse(analyzer.refresh())

        self.assertIs(analyzer.inventory, before_inventory)
        self.assertEqual(analyzer.inventory.to_dict(), before)
        self.assertFalse(analyzer.state.is_loading)
        self.assertEqual(len(analyzer.notifier.notices), notices_before + 1)
        notice = analyzer.notifier.notices[-1]
        self.assertEqual(notice.severity, "error")
        self.assertEqual(notice.message, "Failed to load components: Read timed out")

    def test_reload_replaces_rather_than_merges(self):
        provider = FakeProvider(LISTS)
        analyzer = ComponentAnalyzer(provider)
        analyzer.refresh()
        provider.lists = {"flows": [{"id": "3", "name": "Approval"}]}
        analyzer.refresh()
        self.assertEqual([r.id for r in analyzer.rows], ["3"])


if __name__ == "__main__":
    unittest.main()
