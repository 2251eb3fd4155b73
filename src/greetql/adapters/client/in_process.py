"""Client that calls the gateway directly, without a network hop."""

from __future__ import annotations

from greetql.adapters.graphql.gateway import QueryGateway
from greetql.domain.enums import ResultShape
from greetql.domain.results import QueryResult

from .documents import build_greeting_query, parse_envelope


class InProcessGreetingClient:
    """Run greeting queries against a gateway in the same process.

    Example:
        >>> from greetql.domain import default_catalog
        >>> from greetql.adapters.graphql import build_schema
        >>> shape = ResultShape.PLAIN_TEXT
        >>> client = InProcessGreetingClient(QueryGateway(build_schema(default_catalog(), shape)), shape)
        >>> client.fetch(0).message
        'greeting with ID 0 not found'
    """

    def __init__(self, gateway: QueryGateway, shape: ResultShape) -> None:
        self._gateway = gateway
        self._shape = shape

    def fetch(self, greeting_id: int) -> QueryResult:
        envelope = self._gateway.execute(build_greeting_query(greeting_id, self._shape))
        return parse_envelope(envelope.to_dict(), self._shape)

    def close(self) -> None:
        """Nothing to release."""


__all__ = ["InProcessGreetingClient"]
