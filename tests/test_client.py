"""Greeting clients: query documents, envelope parsing, in-process and HTTP transports."""

from __future__ import annotations

import httpx
import orjson
import pytest

from greetql.adapters.client import (
    HttpGreetingClient,
    InProcessGreetingClient,
    build_greeting_query,
    open_client,
    parse_envelope,
)
from greetql.adapters.config.settings import ClientSettings
from greetql.adapters.graphql import QueryGateway
from greetql.domain import ClientTransport, GreetingFailure, GreetingSuccess, ResultShape, TransportError
from greetql.domain.catalog import DEFAULT_FLOWERS, DEFAULT_GREETINGS

URL = "http://127.0.0.1:8080/"


def _http_client(gateway: QueryGateway, captured: list[httpx.Request] | None = None) -> httpx.Client:
    """httpx client whose transport answers from ``gateway`` without a socket."""

    def _handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        payload = orjson.loads(request.content)
        envelope = gateway.execute(payload["query"], payload.get("variables"), payload.get("operationName"))
        return httpx.Response(200, content=envelope.to_json(), headers={"content-type": "application/json"})

    return httpx.Client(transport=httpx.MockTransport(_handler))


# ======================== documents ========================


@pytest.mark.os_agnostic
def test_plain_document_has_no_selection() -> None:
    assert build_greeting_query(7, ResultShape.PLAIN_TEXT) == "query { greeting(id: 7) }"


@pytest.mark.os_agnostic
def test_decorated_document_selects_text_and_flowers() -> None:
    assert build_greeting_query(7, ResultShape.TEXT_WITH_DECORATION) == "query { greeting(id: 7) { text flowers } }"


@pytest.mark.os_agnostic
def test_parse_envelope_decorated_success() -> None:
    """Both fields come through."""
    payload = {"data": {"greeting": {"text": "hi", "flowers": "🌷"}}}

    assert parse_envelope(payload, ResultShape.TEXT_WITH_DECORATION) == GreetingSuccess(text="hi", flowers="🌷")


@pytest.mark.os_agnostic
def test_parse_envelope_collects_all_error_messages() -> None:
    """Every error message is kept; the first is the headline."""
    payload = {"data": None, "errors": [{"message": "one", "path": ["greeting"]}, {"message": "two"}]}

    outcome = parse_envelope(payload, ResultShape.PLAIN_TEXT)

    assert outcome == GreetingFailure(("one", "two"))
    assert isinstance(outcome, GreetingFailure)
    assert outcome.message == "one"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("payload", "shape"),
    [
        ({"data": None}, ResultShape.PLAIN_TEXT),
        ({"data": {"greeting": 3}}, ResultShape.PLAIN_TEXT),
        ({"data": {"greeting": {"text": "hi"}}}, ResultShape.TEXT_WITH_DECORATION),
        ({"errors": "nope"}, ResultShape.PLAIN_TEXT),
    ],
)
def test_parse_envelope_rejects_malformed_payloads(payload: dict[str, object], shape: ResultShape) -> None:
    """Anything that is neither data nor errors is a transport problem."""
    with pytest.raises(TransportError):
        parse_envelope(payload, shape)


# ======================== in-process ========================


@pytest.mark.os_agnostic
def test_in_process_client_fetches_decorated_greeting(decorated_gateway: QueryGateway) -> None:
    client = InProcessGreetingClient(decorated_gateway, ResultShape.TEXT_WITH_DECORATION)

    assert client.fetch(1) == GreetingSuccess(text=DEFAULT_GREETINGS[0], flowers=DEFAULT_FLOWERS[0])


@pytest.mark.os_agnostic
def test_in_process_client_reports_not_found(plain_gateway: QueryGateway) -> None:
    client = InProcessGreetingClient(plain_gateway, ResultShape.PLAIN_TEXT)

    outcome = client.fetch(42)

    assert isinstance(outcome, GreetingFailure)
    assert outcome.message == "greeting with ID 42 not found"


# ======================== HTTP loopback ========================


@pytest.mark.os_agnostic
def test_http_client_posts_query_document(decorated_gateway: QueryGateway) -> None:
    """The request is a JSON POST carrying only the query."""
    captured: list[httpx.Request] = []
    client = HttpGreetingClient(
        URL, ResultShape.TEXT_WITH_DECORATION, http_client=_http_client(decorated_gateway, captured)
    )

    outcome = client.fetch(3)

    assert outcome == GreetingSuccess(text=DEFAULT_GREETINGS[2], flowers=DEFAULT_FLOWERS[2])
    assert captured[0].method == "POST"
    assert orjson.loads(captured[0].content) == {"query": "query { greeting(id: 3) { text flowers } }"}


@pytest.mark.os_agnostic
def test_http_client_reports_in_band_errors(plain_gateway: QueryGateway) -> None:
    client = HttpGreetingClient(URL, ResultShape.PLAIN_TEXT, http_client=_http_client(plain_gateway))

    outcome = client.fetch(0)

    assert isinstance(outcome, GreetingFailure)
    assert outcome.message == "greeting with ID 0 not found"


@pytest.mark.os_agnostic
def test_http_client_wraps_connection_failures() -> None:
    """Network errors surface as TransportError and are not retried."""
    calls: list[httpx.Request] = []

    def _refuse(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    client = HttpGreetingClient(
        URL, ResultShape.PLAIN_TEXT, http_client=httpx.Client(transport=httpx.MockTransport(_refuse))
    )

    with pytest.raises(TransportError, match="connection refused"):
        client.fetch(1)
    assert len(calls) == 1


@pytest.mark.os_agnostic
def test_http_client_wraps_error_statuses() -> None:
    """Non-2xx responses are transport failures."""
    client = HttpGreetingClient(
        URL,
        ResultShape.PLAIN_TEXT,
        http_client=httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(500))),
    )

    with pytest.raises(TransportError, match="failed"):
        client.fetch(1)


@pytest.mark.os_agnostic
def test_http_client_rejects_undecodable_bodies() -> None:
    client = HttpGreetingClient(
        URL,
        ResultShape.PLAIN_TEXT,
        http_client=httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))),
    )

    with pytest.raises(TransportError, match="cannot decode"):
        client.fetch(1)


@pytest.mark.os_agnostic
def test_http_client_close_closes_the_http_client(plain_gateway: QueryGateway) -> None:
    http_client = _http_client(plain_gateway)
    client = HttpGreetingClient(URL, ResultShape.PLAIN_TEXT, http_client=http_client)

    client.close()

    assert http_client.is_closed


# ======================== open_client ========================


@pytest.mark.os_agnostic
def test_open_client_defaults_to_in_process(plain_gateway: QueryGateway) -> None:
    client = open_client(plain_gateway, ResultShape.PLAIN_TEXT, ClientSettings(), URL)

    assert isinstance(client, InProcessGreetingClient)


@pytest.mark.os_agnostic
def test_open_client_uses_http_when_configured(plain_gateway: QueryGateway) -> None:
    client = open_client(plain_gateway, ResultShape.PLAIN_TEXT, ClientSettings(transport=ClientTransport.HTTP), URL)

    try:
        assert isinstance(client, HttpGreetingClient)
    finally:
        client.close()
