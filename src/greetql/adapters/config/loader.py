"""Configuration loader with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from greetql import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Reject profile names that could escape the configuration directories.

    Raises:
        ValueError: If the name is empty, too long, contains path separators
            or is otherwise refused by lib_layered_config.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One load per (profile, start_dir) for the lifetime of the process.
@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration with the bundled defaults.

    Sources in precedence order: defaults -> app -> host -> user -> dotenv -> env.
    Environment variables follow ``GREETQL___SECTION__KEY``.

    Args:
        profile: Optional profile name inserting ``profile/<name>/`` into all paths.
        start_dir: Directory seeding ``.env`` discovery; cwd when None.

    Returns:
        Immutable configuration object with provenance tracking.

    Example:
        >>> config = get_config()
        >>> config.get("server.port")
        8080
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Drop cached configuration so the next call re-reads every layer."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is not visible once the function is cast to the Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
