"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Example:
        >>> str(ConfigurationError("server.port must be between 0 and 65535"))
        'server.port must be between 0 and 65535'
    """


class InvalidGreetingIdError(ValueError):
    """The ``id`` argument has no integer interpretation.

    Reported in-band as a query error; the listener keeps running.

    Example:
        >>> str(InvalidGreetingIdError("abc"))
        'id must be an integer, got str'
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"id must be an integer, got {type(value).__name__}")


class GreetingNotFoundError(LookupError):
    """The identifier lies outside the catalog range.

    Example:
        >>> err = GreetingNotFoundError(11)
        >>> str(err)
        'greeting with ID 11 not found'
        >>> err.greeting_id
        11
    """

    def __init__(self, greeting_id: int) -> None:
        self.greeting_id = greeting_id
        super().__init__(f"greeting with ID {greeting_id} not found")


class SchemaConstructionError(Exception):
    """The query engine refused the schema definition. Fatal at startup."""


class BindError(OSError):
    """The listener could not bind its address. Fatal at startup, never retried.

    Example:
        >>> err = BindError("0.0.0.0", 8080, "Address already in use")
        >>> str(err)
        'cannot bind 0.0.0.0:8080: Address already in use'
    """

    def __init__(self, host: str, port: int, reason: str) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"cannot bind {host}:{port}: {reason}")

    def __str__(self) -> str:
        return f"cannot bind {self.host}:{self.port}: {self.reason}"


class TransportError(Exception):
    """Sending a query or decoding its response failed on the client side."""


class ShutdownTimeoutError(TimeoutError):
    """In-flight requests outlived the drain timeout and were abandoned."""


class ShutdownRequested(Exception):  # noqa: N818
    """Raised inside the interactive loop when a termination signal arrives."""


__all__ = [
    "BindError",
    "ConfigurationError",
    "GreetingNotFoundError",
    "InvalidGreetingIdError",
    "SchemaConstructionError",
    "ShutdownRequested",
    "ShutdownTimeoutError",
    "TransportError",
]
