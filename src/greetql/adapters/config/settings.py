"""Typed views over the ``[server]``, ``[service]`` and ``[client]`` sections.

Pydantic models validate the raw layered configuration once at the boundary so
the rest of the code works with plain typed attributes.

Contents:
    * :class:`ServerSettings` - Listener address, drain timeout and GraphiQL toggle.
    * :class:`ServiceSettings` - Result shape bound to the schema.
    * :class:`ClientSettings` - Transport used by the interactive loop.
    * :func:`load_settings` - Parse all three sections and apply ``PORT``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from greetql.domain.enums import ClientTransport, ResultShape
from greetql.domain.errors import ConfigurationError

#: Port used when neither configuration nor ``PORT`` provides one.
DEFAULT_PORT = 8080

#: Environment variable that overrides ``server.port`` when non-empty.
PORT_ENV_VAR = "PORT"


class ServerSettings(BaseModel):
    """Validated ``[server]`` section.

    Example:
        >>> ServerSettings().port
        8080
        >>> ServerSettings(port=9090, drain_timeout=1).drain_timeout
        1.0
    """

    host: str = "0.0.0.0"  # noqa: S104
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    drain_timeout: float = Field(default=5.0, gt=0)
    graphiql: bool = True

    model_config = ConfigDict(extra="ignore", frozen=True)


class ServiceSettings(BaseModel):
    """Validated ``[service]`` section."""

    result_shape: ResultShape = ResultShape.TEXT_WITH_DECORATION

    model_config = ConfigDict(extra="ignore", frozen=True)


class ClientSettings(BaseModel):
    """Validated ``[client]`` section."""

    transport: ClientTransport = ClientTransport.IN_PROCESS
    timeout: float = Field(default=10.0, gt=0)

    model_config = ConfigDict(extra="ignore", frozen=True)


@dataclass(frozen=True, slots=True)
class Settings:
    """All typed sections together."""

    server: ServerSettings
    service: ServiceSettings
    client: ClientSettings


def _section(config: Config, name: str) -> dict[str, object]:
    raw: object = config.get(name, default={})
    return dict(cast("Mapping[str, object]", raw)) if raw else {}


def load_settings(config: Config, environ: Mapping[str, str] | None = None) -> Settings:
    """Parse the typed sections from ``config``.

    A non-empty ``PORT`` environment variable wins over ``server.port``.

    Args:
        config: Already-loaded layered configuration.
        environ: Environment mapping, ``os.environ`` when None.

    Raises:
        ConfigurationError: If any section fails validation.

    Example:
        >>> cfg = Config({"server": {"port": 9000}}, {})
        >>> load_settings(cfg, environ={}).server.port
        9000
        >>> load_settings(cfg, environ={"PORT": "7000"}).server.port
        7000
        >>> load_settings(cfg, environ={"PORT": ""}).server.port
        9000
    """
    env = os.environ if environ is None else environ
    server_raw = _section(config, "server")
    port_override = env.get(PORT_ENV_VAR, "").strip()
    if port_override:
        server_raw["port"] = port_override

    try:
        return Settings(
            server=ServerSettings.model_validate(server_raw),
            service=ServiceSettings.model_validate(_section(config, "service")),
            client=ClientSettings.model_validate(_section(config, "client")),
        )
    except ValidationError as exc:
        raise ConfigurationError(_summarize(exc)) from exc


def _summarize(exc: ValidationError) -> str:
    """Collapse pydantic errors into one readable line per field."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{exc.title.removesuffix('Settings').lower()}.{location}: {error['msg']}")
    return "; ".join(parts)


__all__ = [
    "DEFAULT_PORT",
    "PORT_ENV_VAR",
    "ClientSettings",
    "ServerSettings",
    "ServiceSettings",
    "Settings",
    "load_settings",
]
