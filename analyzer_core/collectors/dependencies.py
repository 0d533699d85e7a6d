"""Dependency graph lookup for a single component."""

from __future__ import annotations

import logging
from typing import Any

from analyzer_core.collectors import MetadataError

LOGGER = logging.getLogger("component_analyzer.collectors")


def load_dependencies(provider: Any, component_id: str, component_type: str) -> Any:
    """Any provider failure is raised as :class:`MetadataError`."""
    LOGGER.debug("fetching dependencies for %s %s", component_type, component_id)
    try:
        return provider.get_component_dependencies(component_id, component_type)
    except MetadataError:
        raise
    except Exception as exc:
        LOGGER.debug("dependency lookup for %s failed: %s", component_id, exc)
        raise MetadataError(str(exc)) from exc
