"""Per-request query outcomes as seen by a client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GreetingSuccess:
    """The greeting came back.

    ``flowers`` is None when the service runs the text-only shape.
    """

    text: str
    flowers: str | None = None


@dataclass(frozen=True, slots=True)
class GreetingFailure:
    """The service answered with one or more error messages.

    Example:
        >>> GreetingFailure(("greeting with ID 0 not found",)).message
        'greeting with ID 0 not found'
    """

    messages: tuple[str, ...]

    @property
    def message(self) -> str:
        return self.messages[0] if self.messages else "unknown error"


QueryResult = GreetingSuccess | GreetingFailure


__all__ = [
    "GreetingFailure",
    "GreetingSuccess",
    "QueryResult",
]
