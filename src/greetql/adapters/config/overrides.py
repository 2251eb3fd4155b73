"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    Raises:
        ValueError: If ``=`` or the section dot is missing, or a component is empty.

    Examples:
        >>> override = parse_override("server.port=9090")
        >>> (override.section, override.key_path, override.value)
        ('server', ('port',), 9090)
        >>> parse_override("service.result_shape=text").value
        'text'
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)
    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Parse ``raw`` as JSON, falling back to the raw string.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("2.5")
        2.5
        >>> coerce_value("http")
        'http'
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge CLI overrides into ``config``.

    Returns the original instance when ``raw_overrides`` is empty.

    Raises:
        ValueError: If any override string is malformed.

    Example:
        >>> cfg = Config({"server": {"port": 8080}}, {})
        >>> apply_overrides(cfg, ("server.port=9000",))["server"]["port"]
        9000
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))
    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
