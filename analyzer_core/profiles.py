"""Profile resolution and user config merging for the analyzer dashboard."""

from __future__ import annotations

import json
from pathlib import Path

FULL_PANELS = ["header", "summary", "components", "details", "notices"]

BUILTIN_PROFILES: dict[str, dict] = {
    "full": {
        "panels": FULL_PANELS,
    },
    "compact": {
        "panels": ["header", "components"],
    },
}

PASSTHROUGH_KEYS = ("base_url", "snapshot_dir", "filter", "search", "log_level")


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        config = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(config, dict):
        raise ValueError("config must be a JSON object")
    return config


def resolve_profile(profile: str, config_path: str | None = None) -> dict:
    if profile not in BUILTIN_PROFILES:
        raise ValueError(f"unknown profile: {profile}")

    user_config = load_user_config(config_path)

    selected_profile = user_config.get("profile")
    if selected_profile:
        if selected_profile not in BUILTIN_PROFILES:
            raise ValueError(f"unknown profile in config: {selected_profile}")
        profile = selected_profile
    resolved = dict(BUILTIN_PROFILES[profile])

    panel_config = user_config.get("panels")
    if isinstance(panel_config, dict):
        # disable map: {"notices": false}
        resolved["panels"] = [p for p in FULL_PANELS if panel_config.get(p, p in resolved["panels"])]
    elif isinstance(panel_config, list) and panel_config:
        # explicit order
        filtered = [p for p in panel_config if p in FULL_PANELS]
        if filtered:
            resolved["panels"] = filtered

    if user_config.get("timeout_seconds") is not None:
        value = float(user_config["timeout_seconds"])
        if value <= 0:
            raise ValueError("timeout_seconds must be positive")
        resolved["timeout_seconds"] = value

    for key in PASSTHROUGH_KEYS:
        if user_config.get(key) is not None:
            resolved[key] = user_config[key]

    resolved["name"] = profile
    return resolved
