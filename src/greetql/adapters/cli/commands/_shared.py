"""Shared helpers for CLI command modules.

Internal module (underscore prefix) turning the fatal startup and shutdown
errors into exit codes, and printing query outcomes the same way everywhere.

Contents:
    * :func:`resolve_settings` - Typed settings or exit with CONFIG_ERROR.
    * :func:`build_gateway_or_exit` - Gateway or exit with SCHEMA_ERROR.
    * :func:`start_listener_or_exit` - Started listener or exit with BIND_FAILURE.
    * :func:`drain_listener` - Stop the listener; exit with TIMEOUT when the drain overruns.
    * :func:`echo_outcome` - Print a greeting or an error line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import rich_click as click

from greetql.adapters.config.settings import Settings
from greetql.adapters.graphql.gateway import QueryGateway
from greetql.application.ports import Listener
from greetql.domain.catalog import Catalog
from greetql.domain.enums import ResultShape
from greetql.domain.errors import BindError, ConfigurationError, SchemaConstructionError, ShutdownTimeoutError
from greetql.domain.results import GreetingSuccess, QueryResult

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

#: Shared ``--shape`` choices.
SHAPE_CHOICES: tuple[str, ...] = tuple(shape.value for shape in ResultShape)


def resolve_settings(cli_ctx: CLIContext) -> Settings:
    """Parse typed settings from the loaded configuration.

    Raises:
        SystemExit: With CONFIG_ERROR (78) when validation fails.
    """
    try:
        return cli_ctx.services.load_settings(cli_ctx.config)
    except ConfigurationError as exc:
        click.echo(f"Error: invalid configuration: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def resolve_shape(settings: Settings, shape_override: str | None) -> ResultShape:
    """Return the ``--shape`` override when given, the configured shape otherwise."""
    return ResultShape(shape_override) if shape_override else settings.service.result_shape


def build_gateway_or_exit(cli_ctx: CLIContext, catalog: Catalog, shape: ResultShape) -> QueryGateway:
    """Build the gateway.

    Raises:
        SystemExit: With SCHEMA_ERROR (70) when the schema is rejected.
    """
    try:
        return cli_ctx.services.build_gateway(catalog, shape)
    except SchemaConstructionError as exc:
        logger.critical("Schema construction failed: %s", exc)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.SCHEMA_ERROR) from exc


def start_listener_or_exit(listener: Listener) -> None:
    """Start ``listener``; a bind failure is fatal and not retried.

    Raises:
        SystemExit: With BIND_FAILURE (69).
    """
    try:
        listener.start()
    except BindError as exc:
        logger.critical("Listener failed to start: %s", exc)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.BIND_FAILURE) from exc


def drain_listener(listener: Listener, echo: Callable[[str], None] = click.echo) -> None:
    """Stop ``listener`` within its drain timeout.

    Raises:
        SystemExit: With TIMEOUT (110) when in-flight requests were abandoned.
            The listener is stopped either way.
    """
    echo("Stopping server...")
    try:
        listener.stop()
    except ShutdownTimeoutError as exc:
        logger.error("Shutdown did not finish cleanly: %s", exc)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.TIMEOUT) from exc
    echo("Server stopped.")


def echo_outcome(outcome: QueryResult, echo: Callable[[str], None] = click.echo) -> None:
    """Print a successful greeting (and its flowers) or the first error message.

    Example:
        >>> lines: list[str] = []
        >>> echo_outcome(GreetingSuccess(text="Hi", flowers="🌷"), lines.append)
        >>> lines
        ['Greeting: Hi', 'Flowers: 🌷', '']
    """
    if isinstance(outcome, GreetingSuccess):
        echo(f"Greeting: {outcome.text}")
        if outcome.flowers is not None:
            echo(f"Flowers: {outcome.flowers}")
        echo("")
        return
    echo(f"Error: {outcome.message}")


__all__ = [
    "SHAPE_CHOICES",
    "build_gateway_or_exit",
    "drain_listener",
    "echo_outcome",
    "resolve_settings",
    "resolve_shape",
    "start_listener_or_exit",
]
