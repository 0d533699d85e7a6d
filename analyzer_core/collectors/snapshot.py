"""Metadata provider that reads a directory of exported JSON lists."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from analyzer_core.collectors import MetadataError, read_json


class SnapshotProvider:
    """Serves ``<category>.json`` files and ``dependencies/<id>.json`` graphs."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def get_omni_scripts(self) -> list[dict[str, Any]] | None:
        return self._list("omniscripts")

    def get_data_raptors(self) -> list[dict[str, Any]] | None:
        return self._list("dataraptors")

    def get_integration_procedures(self) -> list[dict[str, Any]] | None:
        return self._list("integrationProcedures")

    def get_flex_cards(self) -> list[dict[str, Any]] | None:
        return self._list("flexcards")

    def get_lightning_web_components(self) -> list[dict[str, Any]] | None:
        return self._list("lwc")

    def get_flows(self) -> list[dict[str, Any]] | None:
        return self._list("flows")

    def get_component_dependencies(self, component_id: str, component_type: str) -> Any:
        path = self.root / "dependencies" / f"{component_id}.json"
        graph = read_json(path)
        if graph is None:
            raise MetadataError(f"no dependency data for {component_type} {component_id}")
        return graph

    def _list(self, key: str) -> list[dict[str, Any]] | None:
        payload = read_json(self.root / f"{key}.json")
        if payload is None or isinstance(payload, list):
            return payload
        raise MetadataError(f"{key}.json does not contain a list")
