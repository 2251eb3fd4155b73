"""GraphQL adapter - schema definition, query gateway and HTTP app.

Contents:
    * :mod:`.schema` - strawberry schema bound to the lookup resolver
    * :mod:`.gateway` - Query execution and response envelopes
    * :mod:`.app` - FastAPI app with the GraphQL router and GraphiQL
    * :mod:`.factory` - Gateway factory for the composition root
"""

from __future__ import annotations

from .app import build_http_app
from .factory import build_gateway
from .gateway import QueryGateway, ResponseEnvelope
from .schema import GreetingSchema, GreetingType, build_schema, schema_sdl

__all__ = [
    "GreetingSchema",
    "GreetingType",
    "QueryGateway",
    "ResponseEnvelope",
    "build_gateway",
    "build_http_app",
    "build_schema",
    "schema_sdl",
]
