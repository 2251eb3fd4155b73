"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Client services
from ..adapters.client import open_client

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_settings

# Query services
from ..adapters.graphql.factory import build_gateway

# Logging services
from ..adapters.logging.setup import init_logging

# Listener services
from ..adapters.server.listener import create_listener

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import ListenerRecorder
    from ..application.ports import (
        BuildGateway,
        CreateListener,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadSettings,
        OpenClient,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_settings: LoadSettings = load_settings
    _assert_build_gateway: BuildGateway = build_gateway
    _assert_create_listener: CreateListener = create_listener
    _assert_open_client: OpenClient = open_client


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    load_settings: LoadSettings
    build_gateway: BuildGateway
    create_listener: CreateListener
    open_client: OpenClient


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        load_settings=load_settings,
        build_gateway=build_gateway,
        create_listener=create_listener,
        open_client=open_client,
    )


def build_testing(*, listeners: ListenerRecorder | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    The real schema and gateway are kept; only configuration, logging and the
    listener are replaced.

    Args:
        listeners: Recorder collecting every listener spy the commands create.
            A fresh one is used when None.
    """
    from ..adapters.memory import (
        ListenerRecorder,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    recorder = listeners if listeners is not None else ListenerRecorder()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_settings=load_settings,
        build_gateway=build_gateway,
        create_listener=recorder,
        open_client=open_client,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    "load_settings",
    # Query
    "build_gateway",
    # Listener and client
    "create_listener",
    "open_client",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
