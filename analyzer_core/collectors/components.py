"""Component inventory collector (all six categories, fetched concurrently)."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from analyzer_core.collectors import PROVIDER_METHODS, MetadataError
from analyzer_core.models import CATEGORY_KEYS, ComponentInventory, PanelData
from analyzer_core.viewmodel import stats

LOGGER = logging.getLogger("component_analyzer.collectors")


class ComponentLoadError(MetadataError):
    """Raised when any of the category fetches fails."""


def load_all(provider: Any) -> ComponentInventory:
    """Fetch every category at once and build a fresh inventory.

    All fetches are allowed to settle before anything is combined. When one
    of them failed, the first failure in category order is raised and no
    inventory is built.
    """
    LOGGER.debug("dispatching %d category fetches", len(CATEGORY_KEYS))
    with ThreadPoolExecutor(max_workers=len(CATEGORY_KEYS)) as executor:
        futures: dict[str, Future[Any]] = {
            key: executor.submit(getattr(provider, PROVIDER_METHODS[key])) for key in CATEGORY_KEYS
        }

    results: dict[str, Any] = {}
    for key, future in futures.items():
        exc = future.exception()
        if exc is not None:
            LOGGER.debug("fetch for %s failed: %s", key, exc)
            raise ComponentLoadError(str(exc)) from exc
        results[key] = future.result()

    inventory = ComponentInventory.from_lists(results)
    for key in CATEGORY_KEYS:
        LOGGER.debug("loaded %d %s", len(inventory.get(key)), key)
    return inventory


def collect(inventory: ComponentInventory) -> PanelData:
    counts = stats(inventory)
    total = counts["total_components"]
    return PanelData(
        key="summary",
        title="Summary",
        status="ok" if total else "warn",
        items=[{"category": key, "count": counts[key]} for key in CATEGORY_KEYS],
        meta={"total_components": total},
        errors=[] if total else ["no components loaded"],
    )
