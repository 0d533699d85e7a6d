"""Pure derivations over a component inventory."""

from __future__ import annotations

from analyzer_core.models import (
    CATEGORIES,
    CATEGORY_BY_KEY,
    CATEGORY_KEYS,
    FILTER_ALL,
    ComponentInventory,
    DerivedRow,
)


def component_type_options() -> list[tuple[str, str]]:
    return [("All Components", FILTER_ALL)] + [(c.option_label, c.key) for c in CATEGORIES]


def validate_filter(filter_type: str) -> str:
    if filter_type != FILTER_ALL and filter_type not in CATEGORY_BY_KEY:
        raise ValueError(f"unknown component filter: {filter_type}")
    return filter_type


def _matches(row: DerivedRow, needle: str) -> bool:
    if needle in row.record.name.lower():
        return True
    description = row.record.description
    if description and needle in description.lower():
        return True
    return needle in row.component_type.lower()


def derive(inventory: ComponentInventory, filter_type: str = FILTER_ALL, search_term: str = "") -> list[DerivedRow]:
    """Flatten the inventory into tagged rows, then apply the search term.

    Categories are visited in their fixed order and each keeps its own record
    order; no sorting happens afterwards.
    """
    validate_filter(filter_type)

    rows: list[DerivedRow] = []
    for category in CATEGORIES:
        if filter_type == FILTER_ALL or filter_type == category.key:
            rows.extend(DerivedRow(record, category.label) for record in inventory.get(category.key))

    if search_term:
        needle = search_term.lower()
        rows = [row for row in rows if _matches(row, needle)]
    return rows


def stats(inventory: ComponentInventory) -> dict[str, int]:
    counts = {key: len(inventory.get(key)) for key in CATEGORY_KEYS}
    counts["total_components"] = sum(counts.values())
    return counts


def find_row(rows: list[DerivedRow], component_id: str) -> DerivedRow | None:
    return next((row for row in rows if row.id == component_id), None)
