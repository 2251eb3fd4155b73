"""Query execution and response envelopes.

:class:`QueryGateway` runs query documents for in-process callers (the CLI
and the interactive loop). The HTTP app mounts the same schema through
strawberry's router. Every per-query failure ends up in the envelope's
``errors`` list; nothing escapes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import orjson
import strawberry


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Top-level response: ``data`` plus an optional ``errors`` list.

    Example:
        >>> ResponseEnvelope(data={"greeting": "hi"}).to_dict()
        {'data': {'greeting': 'hi'}}
        >>> ResponseEnvelope(data=None, errors=({"message": "boom"},)).to_dict()
        {'data': None, 'errors': [{'message': 'boom'}]}
    """

    data: dict[str, Any] | None
    errors: tuple[dict[str, Any], ...] = field(default=())

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"data": self.data}
        if self.errors:
            payload["errors"] = list(self.errors)
        return payload

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_dict())


class QueryGateway:
    """Execute query documents against one schema.

    Args:
        schema: Schema built by :func:`greetql.adapters.graphql.schema.build_schema`.
    """

    def __init__(self, schema: strawberry.Schema) -> None:
        self._schema = schema

    @property
    def schema(self) -> strawberry.Schema:
        return self._schema

    def execute(
        self,
        query: str,
        variables: Mapping[str, Any] | None = None,
        operation_name: str | None = None,
    ) -> ResponseEnvelope:
        """Run ``query`` and serialize the outcome.

        Example:
            >>> from greetql.domain import ResultShape, default_catalog
            >>> from greetql.adapters.graphql.schema import build_schema
            >>> gateway = QueryGateway(build_schema(default_catalog(), ResultShape.PLAIN_TEXT))
            >>> gateway.execute("{ greeting(id: 11) }").errors[0]["message"]
            'greeting with ID 11 not found'
        """
        result = self._schema.execute_sync(
            query,
            variable_values=dict(variables) if variables is not None else None,
            operation_name=operation_name,
        )
        errors = tuple(error.formatted for error in result.errors or ())
        return ResponseEnvelope(data=result.data, errors=errors)


__all__ = [
    "QueryGateway",
    "ResponseEnvelope",
]
