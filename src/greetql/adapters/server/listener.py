"""Production listener factory wiring the HTTP app into a lifecycle."""

from __future__ import annotations

from greetql.adapters.config.settings import ServerSettings
from greetql.adapters.graphql.app import build_http_app
from greetql.adapters.graphql.gateway import QueryGateway

from .lifecycle import ServiceLifecycle


def create_listener(gateway: QueryGateway, settings: ServerSettings) -> ServiceLifecycle:
    """Return a not-yet-started lifecycle serving ``gateway`` per ``settings``.

    Example:
        >>> from greetql.domain import ResultShape, default_catalog
        >>> from greetql.adapters.graphql import build_schema
        >>> gateway = QueryGateway(build_schema(default_catalog(), ResultShape.PLAIN_TEXT))
        >>> create_listener(gateway, ServerSettings(port=9999)).port
        9999
    """
    app = build_http_app(gateway, graphiql=settings.graphiql)
    return ServiceLifecycle(
        app,
        host=settings.host,
        port=settings.port,
        drain_timeout=settings.drain_timeout,
    )


__all__ = ["create_listener"]
