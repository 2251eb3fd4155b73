"""Shared pytest fixtures for CLI, gateway and lifecycle tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greetql.adapters.graphql import QueryGateway
    from greetql.adapters.memory import ListenerRecorder
    from greetql.composition import AppServices
    from greetql.domain import Catalog


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture(autouse=True)
def _no_port_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ``PORT`` variable from leaking into settings."""
    monkeypatch.delenv("PORT", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output; log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from greetql.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test."""
    from greetql.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def catalog() -> Catalog:
    """The bundled ten-entry catalog."""
    from greetql.domain import default_catalog

    return default_catalog()


@pytest.fixture
def decorated_gateway(catalog: Catalog) -> QueryGateway:
    """Gateway bound to the text-with-decoration shape."""
    from greetql.adapters.graphql import build_gateway
    from greetql.domain import ResultShape

    return build_gateway(catalog, ResultShape.TEXT_WITH_DECORATION)


@pytest.fixture
def plain_gateway(catalog: Catalog) -> QueryGateway:
    """Gateway bound to the plain-text shape."""
    from greetql.adapters.graphql import build_gateway
    from greetql.domain import ResultShape

    return build_gateway(catalog, ResultShape.PLAIN_TEXT)


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory that serves ``config_data`` as the loaded config.

    Everything else is production-wired; use ``service_cli_context`` when the
    command would start a real listener.
    """
    from greetql.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            load_settings=prod.load_settings,
            build_gateway=prod.build_gateway,
            create_listener=prod.create_listener,
            open_client=prod.open_client,
        )
        return lambda: test_services

    return _create


@dataclass
class ServiceCliContext:
    """Services factory plus the recorder holding every listener it created.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        listeners: Recorder whose ``created`` list holds the listener spies.
    """

    factory: Callable[[], Any]
    listeners: ListenerRecorder

    @property
    def listener(self) -> Any:
        """The single listener the command created."""
        assert len(self.listeners.created) == 1
        return self.listeners.created[0]


@pytest.fixture
def service_cli_context(
    clear_config_cache: None,
) -> Callable[..., ServiceCliContext]:
    """Create a CLI test context whose listeners are spies instead of sockets.

    Real logging, settings, schema, gateway and client; only the listener
    and the config source are replaced.

    Example:
        def test_serve(cli_runner, service_cli_context) -> None:
            ctx = service_cli_context({"server": {"port": 9000}})
            result = cli_runner.invoke(cli, ["serve"], obj=ctx.factory)
            assert ctx.listener.calls[0] == "start"
    """
    from greetql.adapters.memory import ListenerRecorder
    from greetql.composition import AppServices, build_production

    def _create(config_data: dict[str, Any] | None = None) -> ServiceCliContext:
        config = Config(config_data or {}, {})
        recorder = ListenerRecorder()
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            load_settings=prod.load_settings,
            build_gateway=prod.build_gateway,
            create_listener=recorder,
            open_client=prod.open_client,
        )
        return ServiceCliContext(factory=lambda: test_services, listeners=recorder)

    return _create
