"""Gateway factory used by the composition root."""

from __future__ import annotations

from greetql.domain.catalog import Catalog
from greetql.domain.enums import ResultShape

from .gateway import QueryGateway
from .schema import build_schema


def build_gateway(catalog: Catalog, shape: ResultShape) -> QueryGateway:
    """Build the schema for ``shape`` and wrap it in a gateway.

    Raises:
        SchemaConstructionError: If the schema cannot be built.
    """
    return QueryGateway(build_schema(catalog, shape))


__all__ = ["build_gateway"]
