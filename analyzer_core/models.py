"""Shared model contracts for component inventory data flow."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ComponentCategory:
    key: str
    label: str
    option_label: str
    operation: str


CATEGORIES: tuple[ComponentCategory, ...] = (
    ComponentCategory("omniscripts", "OmniScript", "OmniScripts", "getOmniScripts"),
    ComponentCategory("dataraptors", "DataRaptor", "DataRaptors", "getDataRaptors"),
    ComponentCategory(
        "integrationProcedures",
        "Integration Procedure",
        "Integration Procedures",
        "getIntegrationProcedures",
    ),
    ComponentCategory("flexcards", "FlexCard", "FlexCards", "getFlexCards"),
    ComponentCategory("lwc", "LWC", "Lightning Web Components", "getLightningWebComponents"),
    ComponentCategory("flows", "Flow", "Flows", "getFlows"),
)

CATEGORY_KEYS = tuple(c.key for c in CATEGORIES)
CATEGORY_BY_KEY = {c.key: c for c in CATEGORIES}

FILTER_ALL = "all"
TABS = ("overview", "details", "dependencies")

_KNOWN_FIELDS = {"id", "name", "status", "description", "lastModified"}


def category_for(value: str) -> ComponentCategory | None:
    """Resolve a category from its key or display label."""
    if value in CATEGORY_BY_KEY:
        return CATEGORY_BY_KEY[value]
    for category in CATEGORIES:
        if category.label == value:
            return category
    return None


@dataclass
class ComponentRecord:
    id: str
    name: str
    status: str | None = None
    description: str | None = None
    last_modified: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ComponentRecord":
        extra = {k: v for k, v in payload.items() if k not in _KNOWN_FIELDS}
        return cls(
            id=_text_or_empty(payload.get("id")),
            name=_text_or_empty(payload.get("name")),
            status=_optional_text(payload.get("status")),
            description=_optional_text(payload.get("description")),
            last_modified=_optional_text(payload.get("lastModified")),
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data["id"] = self.id
        data["name"] = self.name
        if self.status is not None:
            data["status"] = self.status
        if self.description is not None:
            data["description"] = self.description
        if self.last_modified is not None:
            data["lastModified"] = self.last_modified
        return data


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _text_or_empty(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class DerivedRow:
    record: ComponentRecord
    component_type: str

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def name(self) -> str:
        return self.record.name

    def to_dict(self) -> dict[str, Any]:
        data = self.record.to_dict()
        data["componentType"] = self.component_type
        return data


@dataclass
class ComponentInventory:
    """Fetched records, one ordered list per category key."""

    records: dict[str, list[ComponentRecord]] = field(
        default_factory=lambda: {key: [] for key in CATEGORY_KEYS}
    )

    @classmethod
    def from_lists(cls, lists: dict[str, list[dict[str, Any]] | None]) -> "ComponentInventory":
        records: dict[str, list[ComponentRecord]] = {}
        for key in CATEGORY_KEYS:
            rows = lists.get(key) or []
            records[key] = [ComponentRecord.from_payload(row) for row in rows if isinstance(row, dict)]
        return cls(records=records)

    def get(self, key: str) -> list[ComponentRecord]:
        return self.records.get(key) or []

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {key: [r.to_dict() for r in self.get(key)] for key in CATEGORY_KEYS}


@dataclass
class ViewState:
    selected_tab: str = "overview"
    search_term: str = ""
    filter_type: str = FILTER_ALL
    selected_component: DerivedRow | None = None
    dependency_graph: Any = None
    is_loading: bool = False

    def to_dict(self) -> dict[str, Any]:
        selected = self.selected_component
        return {
            "selected_tab": self.selected_tab,
            "search_term": self.search_term,
            "filter_type": self.filter_type,
            "selected_component": selected.to_dict() if selected is not None else None,
            "dependency_graph": self.dependency_graph,
            "is_loading": self.is_loading,
        }


@dataclass
class PanelData:
    key: str
    title: str
    status: str = "ok"
    items: list[dict[str, Any]] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "status": self.status,
            "items": self.items,
            "meta": self.meta,
            "errors": self.errors,
        }
