"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` matches the signature of the corresponding
adapter function, so plain module-level functions satisfy it structurally
(PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types are imported under
    ``TYPE_CHECKING`` only, keeping the layer free of runtime adapter imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

from ..domain.catalog import Catalog
from ..domain.enums import OutputFormat, ResultShape
from ..domain.results import QueryResult

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import ClientSettings, ServerSettings, Settings
    from ..adapters.graphql.gateway import QueryGateway


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadSettings(Protocol):
    """Parse typed service settings from configuration."""

    def __call__(self, config: Config, environ: Mapping[str, str] | None = ...) -> Settings: ...


class BuildGateway(Protocol):
    """Build the query gateway for a catalog and result shape."""

    def __call__(self, catalog: Catalog, shape: ResultShape) -> QueryGateway: ...


class Listener(Protocol):
    """A startable, drainable request listener."""

    @property
    def base_url(self) -> str: ...

    def start(self) -> None: ...

    def install_signal_handlers(self, *, interrupt: bool = ...) -> None: ...

    def request_stop(self) -> None: ...

    def wait(self, timeout: float | None = ...) -> bool: ...

    def stop(self) -> None: ...


class CreateListener(Protocol):
    """Create a not-yet-started listener serving the gateway."""

    def __call__(self, gateway: QueryGateway, settings: ServerSettings) -> Listener: ...


class GreetingClient(Protocol):
    """Fetch greetings by identifier."""

    def fetch(self, greeting_id: int) -> QueryResult: ...

    def close(self) -> None: ...


class OpenClient(Protocol):
    """Open a greeting client for the configured transport."""

    def __call__(
        self, gateway: QueryGateway, shape: ResultShape, settings: ClientSettings, base_url: str
    ) -> GreetingClient: ...


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
