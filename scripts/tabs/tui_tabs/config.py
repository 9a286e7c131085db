"""Profile resolution and user config merging for the tab host."""

from __future__ import annotations

import json
import os
from pathlib import Path

from tui_tabs.keys import KeyBinding, KeyMap
from tui_tabs.tabgroup import (
    DEFAULT_SEPARATOR,
    ROUTE_BROADCAST,
    ROUTING_POLICIES,
    Option,
    with_keymap,
    with_routing,
    with_separator,
)

PROFILE_ENV = "TUI_TABS_PROFILE"

BUILTIN_PROFILES: dict[str, dict] = {
    "default": {
        "keys": {"tab_next": ["alt+right"], "tab_prev": ["alt+left"]},
        "routing": ROUTE_BROADCAST,
        "separator": DEFAULT_SEPARATOR,
        "refresh_seconds": 2,
    },
    "vim": {
        "keys": {"tab_next": ["l", "alt+right"], "tab_prev": ["h", "alt+left"]},
        "routing": ROUTE_BROADCAST,
        "separator": DEFAULT_SEPARATOR,
        "refresh_seconds": 2,
    },
}

KEY_HELP = {
    "tab_next": "Next tab",
    "tab_prev": "Prev tab",
}


def default_profile_name() -> str:
    return os.environ.get(PROFILE_ENV, "default")


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        data = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("invalid JSON config: top level must be an object")
    return data


def _key_list(name: str, value) -> list[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not value or not all(isinstance(k, str) and k for k in value):
        raise ValueError(f"invalid keys for {name}: expected a non-empty list of key names")
    return list(value)


def resolve_profile(profile: str | None = None, config_path: str | None = None) -> dict:
    profile = profile or default_profile_name()
    if profile not in BUILTIN_PROFILES:
        raise ValueError(f"unknown profile: {profile}")

    user_config = load_user_config(config_path)

    selected_profile = user_config.get("profile")
    if selected_profile:
        if selected_profile not in BUILTIN_PROFILES:
            raise ValueError(f"unknown profile in config: {selected_profile}")
        profile = selected_profile

    base = BUILTIN_PROFILES[profile]
    resolved = dict(base)
    resolved["keys"] = dict(base["keys"])

    key_config = user_config.get("keys")
    if key_config is not None:
        if not isinstance(key_config, dict):
            raise ValueError("invalid keys config: expected an object")
        for name, value in key_config.items():
            if name not in KEY_HELP:
                raise ValueError(f"unknown key binding: {name}")
            resolved["keys"][name] = _key_list(name, value)

    if "routing" in user_config:
        routing = user_config["routing"]
        if routing not in ROUTING_POLICIES:
            raise ValueError(f"unknown routing policy: {routing}")
        resolved["routing"] = routing

    if "separator" in user_config:
        resolved["separator"] = str(user_config["separator"])

    if "refresh_seconds" in user_config:
        raw = user_config["refresh_seconds"]
        try:
            value = int(raw)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid refresh_seconds: {raw!r}") from exc
        resolved["refresh_seconds"] = max(1, value)

    resolved["name"] = profile
    return resolved


def keymap_from(profile: dict) -> KeyMap:
    keys = profile["keys"]
    bindings = {}
    for name, desc in KEY_HELP.items():
        names = keys[name]
        bindings[name] = KeyBinding.new(*names, help_text=("/".join(names), desc))
    return KeyMap(**bindings)


def options_from(profile: dict) -> list[Option]:
    return [
        with_keymap(keymap_from(profile)),
        with_routing(profile["routing"]),
        with_separator(profile["separator"]),
    ]
