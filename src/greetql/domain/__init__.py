"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.catalog` - Greeting records and the fixed catalog
    * :mod:`.resolver` - ``greeting`` field resolution
    * :mod:`.results` - Client-side query outcomes
    * :mod:`.enums` - Domain enumerations (ResultShape, ClientTransport, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .catalog import Catalog, GreetingRecord, default_catalog
from .enums import ClientTransport, OutputFormat, ResultShape
from .errors import (
    BindError,
    ConfigurationError,
    GreetingNotFoundError,
    InvalidGreetingIdError,
    SchemaConstructionError,
    ShutdownRequested,
    ShutdownTimeoutError,
    TransportError,
)
from .resolver import coerce_greeting_id, lookup_greeting, resolve_greeting
from .results import GreetingFailure, GreetingSuccess, QueryResult

__all__ = [
    # Catalog
    "Catalog",
    "GreetingRecord",
    "default_catalog",
    # Resolver
    "coerce_greeting_id",
    "lookup_greeting",
    "resolve_greeting",
    # Results
    "GreetingFailure",
    "GreetingSuccess",
    "QueryResult",
    # Enums
    "ClientTransport",
    "OutputFormat",
    "ResultShape",
    # Errors
    "BindError",
    "ConfigurationError",
    "GreetingNotFoundError",
    "InvalidGreetingIdError",
    "SchemaConstructionError",
    "ShutdownRequested",
    "ShutdownTimeoutError",
    "TransportError",
]
