"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that never touch the
filesystem, the network or the logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.listener` - Listener spy and recorder
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
)
from .listener import ListenerRecorder, ListenerSpy
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from greetql.application.ports import (
        CreateListener,
        DisplayConfig,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_create_listener: CreateListener = ListenerRecorder()

__all__ = [
    "ListenerRecorder",
    "ListenerSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
