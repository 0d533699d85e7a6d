#!/usr/bin/env python3
"""Thin entrypoint for the component analyzer dashboard."""

from __future__ import annotations

from analyzer_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
