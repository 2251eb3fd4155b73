"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    BuildGateway,
    CreateListener,
    DisplayConfig,
    GetConfig,
    GreetingClient,
    InitLogging,
    Listener,
    LoadSettings,
    OpenClient,
)

__all__ = [
    "BuildGateway",
    "CreateListener",
    "DisplayConfig",
    "GetConfig",
    "GreetingClient",
    "InitLogging",
    "Listener",
    "LoadSettings",
    "OpenClient",
]
