"""Client that POSTs greeting queries to the listener over HTTP."""

from __future__ import annotations

import logging

import httpx
import orjson

from greetql.domain.enums import ResultShape
from greetql.domain.errors import TransportError
from greetql.domain.results import QueryResult

from .documents import build_greeting_query, parse_envelope

logger = logging.getLogger(__name__)


class HttpGreetingClient:
    """POST ``{"query": ...}`` documents to ``url`` and parse the envelope.

    Args:
        url: Gateway URL, e.g. ``http://127.0.0.1:8080/``.
        shape: Result shape the service was started with.
        timeout: Seconds to wait for each response.
        http_client: Pre-built client, mainly for tests. Closed by :meth:`close`.
    """

    def __init__(
        self,
        url: str,
        shape: ResultShape,
        *,
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._shape = shape
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    def fetch(self, greeting_id: int) -> QueryResult:
        """Send one query.

        Raises:
            TransportError: On connection failures, non-2xx statuses or
                undecodable responses. Never retried.
        """
        body = {"query": build_greeting_query(greeting_id, self._shape)}
        try:
            response = self._http.post(self._url, json=body, headers={"Accept": "application/json"})
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(f"request to {self._url} failed: {exc}") from exc

        try:
            payload = orjson.loads(response.content)
        except orjson.JSONDecodeError as exc:
            raise TransportError(f"cannot decode response: {exc}") from exc
        if not isinstance(payload, dict):
            raise TransportError(f"expected a JSON object, got {type(payload).__name__}")
        logger.debug("Loopback response", extra={"status": response.status_code, "greeting_id": greeting_id})
        return parse_envelope(payload, self._shape)

    def close(self) -> None:
        self._http.close()


__all__ = ["HttpGreetingClient"]
