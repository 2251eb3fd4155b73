"""GraphQL schema binding the ``greeting`` field to the lookup resolver.

Exactly one result shape is bound per schema:

.. code-block:: graphql

    type Query { greeting(id: Int!): String! }                  # text
    type Query { greeting(id: Int!): Greeting! }                # text_with_decoration
    type Greeting { text: String!  flowers: String! }

Contents:
    * :class:`GreetingType` - The ``Greeting`` object type.
    * :class:`GreetingSchema` - Schema that logs expected query errors quietly.
    * :func:`build_schema` - Build the schema for a catalog and result shape.
    * :func:`schema_sdl` - Printed SDL of a schema.

Note:
    No postponed annotations here: strawberry reads the resolver signatures
    of the locally defined query types at decoration time.
"""

import logging
from typing import Annotated, Any, cast

import strawberry
from graphql import GraphQLError
from strawberry.exceptions import StrawberryException

from greetql.domain.catalog import Catalog, GreetingRecord
from greetql.domain.enums import ResultShape
from greetql.domain.errors import GreetingNotFoundError, InvalidGreetingIdError, SchemaConstructionError
from greetql.domain.resolver import resolve_greeting

logger = logging.getLogger(__name__)

_EXPECTED_ERRORS = (GreetingNotFoundError, InvalidGreetingIdError)

GreetingId = Annotated[int, strawberry.argument(name="id")]


@strawberry.type(name="Greeting", description="A greeting together with its flower decoration.")
class GreetingType:
    text: str
    flowers: str

    @classmethod
    def from_record(cls, record: GreetingRecord) -> "GreetingType":
        return cls(text=record.text, flowers=record.decoration)


class GreetingSchema(strawberry.Schema):
    """Strawberry schema that keeps client mistakes out of the error log.

    Lookup failures and engine validation errors are the caller's problem and
    are logged at INFO without a traceback. Anything else goes through
    strawberry's default error logging.
    """

    def process_errors(self, errors: list[GraphQLError], execution_context: Any = None) -> None:
        unexpected = []
        for error in errors:
            if error.original_error is None or isinstance(error.original_error, _EXPECTED_ERRORS):
                logger.info("Query rejected: %s", error.message)
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


def _plain_text_query(catalog: Catalog) -> type:
    def plain_greeting(greeting_id: GreetingId) -> str:
        return cast(str, resolve_greeting(catalog, greeting_id, ResultShape.PLAIN_TEXT))

    @strawberry.type(name="Query")
    class Query:
        greeting: str = strawberry.field(resolver=plain_greeting, description="Greeting text by identifier.")

    return Query


def _decorated_query(catalog: Catalog) -> type:
    def decorated_greeting(greeting_id: GreetingId) -> GreetingType:
        record = cast(GreetingRecord, resolve_greeting(catalog, greeting_id, ResultShape.TEXT_WITH_DECORATION))
        return GreetingType.from_record(record)

    @strawberry.type(name="Query")
    class Query:
        greeting: GreetingType = strawberry.field(
            resolver=decorated_greeting, description="Greeting text and flowers by identifier."
        )

    return Query


def build_schema(catalog: Catalog, shape: ResultShape) -> GreetingSchema:
    """Build the schema for ``shape`` with resolvers closed over ``catalog``.

    Raises:
        SchemaConstructionError: If the engine rejects the type definitions.

    Example:
        >>> from greetql.domain.catalog import default_catalog
        >>> schema = build_schema(default_catalog(), ResultShape.PLAIN_TEXT)
        >>> "greeting(id: Int!): String!" in schema_sdl(schema)
        True
    """
    query = _plain_text_query(catalog) if shape is ResultShape.PLAIN_TEXT else _decorated_query(catalog)
    try:
        schema = GreetingSchema(query=query)
    except (StrawberryException, GraphQLError, TypeError, ValueError) as exc:
        raise SchemaConstructionError(f"cannot build {shape.value} schema: {exc}") from exc
    logger.debug("Built GraphQL schema", extra={"result_shape": shape.value, "catalog_size": len(catalog)})
    return schema


def schema_sdl(schema: strawberry.Schema) -> str:
    """Return the schema in GraphQL SDL."""
    return schema.as_str()


__all__ = [
    "GreetingSchema",
    "GreetingType",
    "build_schema",
    "schema_sdl",
]
