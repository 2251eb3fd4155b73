"""Port contracts: in-memory adapters behave like the production ones where it matters.

Static conformance is asserted in composition; these tests pin behaviour.
"""

from __future__ import annotations

import dataclasses

import pytest
from lib_layered_config import Config

from greetql.adapters.config.settings import ServerSettings
from greetql.adapters.graphql import QueryGateway
from greetql.adapters.memory import (
    ListenerRecorder,
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
)
from greetql.adapters.server import LifecycleState, ServiceLifecycle, create_listener
from greetql.composition import AppServices, build_production, build_testing
from greetql.domain import ResultShape, default_catalog


@pytest.mark.os_agnostic
def test_in_memory_config_is_empty() -> None:
    config = get_config_in_memory(profile="anything")

    assert isinstance(config, Config)
    assert config.get("server.port") is None


@pytest.mark.os_agnostic
def test_in_memory_display_and_logging_are_silent(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"server": {"port": 1}}, {})

    display_config_in_memory(config)
    init_logging_in_memory(config)

    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_listener_recorder_keeps_every_spy(plain_gateway: QueryGateway) -> None:
    recorder = ListenerRecorder()

    first = recorder(plain_gateway, ServerSettings(port=1))
    second = recorder(plain_gateway, ServerSettings(port=2))

    assert recorder.created == [first, second]
    assert second.base_url == "http://127.0.0.1:2/"


@pytest.mark.os_agnostic
def test_production_listener_is_an_unstarted_lifecycle(plain_gateway: QueryGateway) -> None:
    listener = create_listener(plain_gateway, ServerSettings(port=0, drain_timeout=3))

    assert isinstance(listener, ServiceLifecycle)
    assert listener.state is LifecycleState.STOPPED
    assert listener.drain_timeout == 3.0


@pytest.mark.os_agnostic
def test_build_testing_swaps_only_the_edges() -> None:
    """Testing services keep the real gateway wiring."""
    prod = build_production()
    testing = build_testing()

    assert isinstance(testing, AppServices)
    assert testing.build_gateway is prod.build_gateway
    assert testing.load_settings is prod.load_settings
    assert isinstance(testing.create_listener, ListenerRecorder)


@pytest.mark.os_agnostic
def test_build_testing_accepts_a_shared_recorder() -> None:
    recorder = ListenerRecorder()
    services = build_testing(listeners=recorder)
    gateway = services.build_gateway(default_catalog(), ResultShape.PLAIN_TEXT)

    services.create_listener(gateway, ServerSettings())

    assert len(recorder.created) == 1


@pytest.mark.os_agnostic
def test_app_services_carries_only_ports_the_commands_use() -> None:
    """Every service slot is one a command reaches through the CLI context."""
    assert [field.name for field in dataclasses.fields(AppServices)] == [
        "get_config",
        "display_config",
        "init_logging",
        "load_settings",
        "build_gateway",
        "create_listener",
        "open_client",
    ]
