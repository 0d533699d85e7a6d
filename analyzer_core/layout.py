"""Responsive layout selection by terminal size."""

from __future__ import annotations


def select_layout_mode(width: int) -> str:
    if width < 120:
        return "narrow"
    return "wide"


def visible_row_budget(height: int, mode: str) -> int:
    # header, summary and borders take the rest
    reserved = 20 if mode == "narrow" else 10
    return max(5, height - reserved)
