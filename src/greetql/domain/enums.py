"""Type-safe domain enums for result shapes, client transports and output formats."""

from __future__ import annotations

from enum import Enum


class ResultShape(str, Enum):
    """Shape of the ``greeting`` field result.

    Exactly one shape is bound to the schema at startup.

    Attributes:
        PLAIN_TEXT: ``greeting(id: Int!): String!``
        TEXT_WITH_DECORATION: ``greeting(id: Int!): Greeting!`` with ``text`` and ``flowers``.

    Example:
        >>> ResultShape("text") is ResultShape.PLAIN_TEXT
        True
    """

    PLAIN_TEXT = "text"
    TEXT_WITH_DECORATION = "text_with_decoration"


class ClientTransport(str, Enum):
    """How the interactive loop reaches the query gateway.

    Attributes:
        IN_PROCESS: Execute the document directly against the schema.
        HTTP: POST the document to the running listener over loopback.
    """

    IN_PROCESS = "in_process"
    HTTP = "http"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "ClientTransport",
    "OutputFormat",
    "ResultShape",
]
