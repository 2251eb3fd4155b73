"""FastAPI application exposing the gateway's schema over HTTP.

``POST /`` takes ``{"query": ...}`` and answers with the JSON envelope.
``GET /`` serves the GraphiQL browser when enabled. ``GET /healthz`` is a
liveness probe.
"""

from __future__ import annotations

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from greetql import __init__conf__

from .gateway import QueryGateway


def build_http_app(gateway: QueryGateway, *, graphiql: bool = True) -> FastAPI:
    """Create the ASGI app served by the listener.

    Args:
        gateway: Gateway whose schema is mounted at ``/``.
        graphiql: Serve the interactive GraphiQL page on ``GET /``.
    """
    app = FastAPI(
        title=__init__conf__.title,
        version=__init__conf__.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get("/healthz", include_in_schema=False)
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    router: GraphQLRouter[object, None] = GraphQLRouter(
        gateway.schema,
        path="/",
        graphql_ide="graphiql" if graphiql else None,
    )
    app.include_router(router)
    return app


__all__ = ["build_http_app"]
