"""Client adapter - ways for the interactive loop to reach the gateway.

Contents:
    * :mod:`.documents` - Query documents and envelope parsing
    * :mod:`.in_process` - Direct in-process calls (default)
    * :mod:`.loopback` - HTTP POSTs to the running listener via httpx
    * :func:`open_client` - Pick a client for the configured transport
"""

from __future__ import annotations

from greetql.adapters.config.settings import ClientSettings
from greetql.adapters.graphql.gateway import QueryGateway
from greetql.domain.enums import ClientTransport, ResultShape

from .documents import build_greeting_query, parse_envelope
from .in_process import InProcessGreetingClient
from .loopback import HttpGreetingClient


def open_client(
    gateway: QueryGateway,
    shape: ResultShape,
    settings: ClientSettings,
    base_url: str,
) -> InProcessGreetingClient | HttpGreetingClient:
    """Return the client matching ``settings.transport``."""
    if settings.transport is ClientTransport.HTTP:
        return HttpGreetingClient(base_url, shape, timeout=settings.timeout)
    return InProcessGreetingClient(gateway, shape)


__all__ = [
    "HttpGreetingClient",
    "InProcessGreetingClient",
    "build_greeting_query",
    "open_client",
    "parse_envelope",
]
