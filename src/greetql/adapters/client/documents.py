"""Greeting query documents and envelope parsing shared by all clients."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from greetql.domain.enums import ResultShape
from greetql.domain.errors import TransportError
from greetql.domain.results import GreetingFailure, GreetingSuccess, QueryResult


def build_greeting_query(greeting_id: int, shape: ResultShape) -> str:
    """Return the query document for ``greeting_id``.

    Examples:
        >>> build_greeting_query(3, ResultShape.PLAIN_TEXT)
        'query { greeting(id: 3) }'
        >>> build_greeting_query(3, ResultShape.TEXT_WITH_DECORATION)
        'query { greeting(id: 3) { text flowers } }'
    """
    selection = "" if shape is ResultShape.PLAIN_TEXT else " { text flowers }"
    return f"query {{ greeting(id: {int(greeting_id)}){selection} }}"


class _ErrorModel(BaseModel):
    message: str

    model_config = ConfigDict(extra="ignore")


class _EnvelopeModel(BaseModel):
    data: dict[str, Any] | None = None
    errors: list[_ErrorModel] = []

    model_config = ConfigDict(extra="ignore")


class _DecoratedGreetingModel(BaseModel):
    text: str
    flowers: str


def parse_envelope(payload: Mapping[str, Any], shape: ResultShape) -> QueryResult:
    """Turn a response envelope into a :data:`QueryResult`.

    Raises:
        TransportError: If the payload is not a well-formed envelope.

    Examples:
        >>> parse_envelope({"data": {"greeting": "hi"}}, ResultShape.PLAIN_TEXT)
        GreetingSuccess(text='hi', flowers=None)
        >>> parse_envelope({"data": None, "errors": [{"message": "nope"}]}, ResultShape.PLAIN_TEXT).message
        'nope'
    """
    try:
        envelope = _EnvelopeModel.model_validate(payload)
        if envelope.errors:
            return GreetingFailure(tuple(error.message for error in envelope.errors))
        greeting: object = (envelope.data or {}).get("greeting")
        if greeting is None:
            raise TransportError("response carries neither data nor errors")
        if shape is ResultShape.PLAIN_TEXT:
            if not isinstance(greeting, str):
                raise TransportError(f"expected a string greeting, got {type(greeting).__name__}")
            return GreetingSuccess(text=greeting)
        decorated = _DecoratedGreetingModel.model_validate(greeting)
    except ValidationError as exc:
        raise TransportError(f"malformed response envelope: {exc.error_count()} validation error(s)") from exc
    return GreetingSuccess(text=decorated.text, flowers=decorated.flowers)


__all__ = [
    "build_greeting_query",
    "parse_envelope",
]
