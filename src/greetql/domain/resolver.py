"""Resolution logic for the ``greeting`` query field.

Pure functions only: the catalog is passed in and nothing is cached.
"""

from __future__ import annotations

import operator

from .catalog import Catalog, GreetingRecord
from .enums import ResultShape
from .errors import GreetingNotFoundError, InvalidGreetingIdError


def coerce_greeting_id(value: object) -> int:
    """Return ``value`` as an integer identifier.

    The query engine already types the argument as ``Int!``, but the resolver
    does not trust the binding and checks the dynamic value again.

    Raises:
        InvalidGreetingIdError: If ``value`` is a bool or has no integer interpretation.

    Examples:
        >>> coerce_greeting_id(3)
        3
        >>> coerce_greeting_id("3")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidGreetingIdError: id must be an integer, got str
    """
    if isinstance(value, bool):
        raise InvalidGreetingIdError(value)
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise InvalidGreetingIdError(value) from exc


def lookup_greeting(catalog: Catalog, value: object) -> GreetingRecord:
    """Validate ``value`` and return the matching catalog record.

    Raises:
        InvalidGreetingIdError: If ``value`` is not an integer.
        GreetingNotFoundError: If the identifier is outside ``[1, len(catalog)]``.
    """
    greeting_id = coerce_greeting_id(value)
    record = catalog.get(greeting_id)
    if record is None:
        raise GreetingNotFoundError(greeting_id)
    return record


def resolve_greeting(catalog: Catalog, value: object, shape: ResultShape) -> str | GreetingRecord:
    """Resolve the ``greeting`` field for the configured result shape.

    Args:
        catalog: Read-only greeting catalog.
        value: Raw ``id`` argument as bound by the query engine.
        shape: ``PLAIN_TEXT`` yields the bare text, ``TEXT_WITH_DECORATION``
            yields the whole record.

    Example:
        >>> from greetql.domain.catalog import default_catalog
        >>> resolve_greeting(default_catalog(), 3, ResultShape.TEXT_WITH_DECORATION).decoration
        '🌷🌷🌷'
    """
    record = lookup_greeting(catalog, value)
    if shape is ResultShape.PLAIN_TEXT:
        return record.text
    return record


__all__ = [
    "coerce_greeting_id",
    "lookup_greeting",
    "resolve_greeting",
]
