"""Collector helpers and package exports."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

PROVIDER_METHODS = {
    "omniscripts": "get_omni_scripts",
    "dataraptors": "get_data_raptors",
    "integrationProcedures": "get_integration_procedures",
    "flexcards": "get_flex_cards",
    "lwc": "get_lightning_web_components",
    "flows": "get_flows",
}


class MetadataError(RuntimeError):
    """Raised when the metadata backend cannot answer a request."""


def read_json(path: Path) -> Any:
    """Return parsed JSON, None when the file is absent."""
    try:
        text = path.read_text()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise MetadataError(f"cannot read {path.name}: {exc.strerror or exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MetadataError(f"invalid JSON in {path.name}: {exc.msg}") from exc


def env_base_url() -> str | None:
    return os.environ.get("COMPONENT_ANALYZER_URL") or None
