"""One-shot query commands: ``greeting`` and ``schema``.

Both run in-process against a freshly built gateway; no listener is started.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from greetql.adapters.client import InProcessGreetingClient, build_greeting_query
from greetql.adapters.graphql.schema import schema_sdl
from greetql.domain.catalog import default_catalog
from greetql.domain.results import GreetingFailure

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import SHAPE_CHOICES, build_gateway_or_exit, echo_outcome, resolve_settings, resolve_shape

logger = logging.getLogger(__name__)


@click.command("greeting", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("greeting_id", metavar="ID", type=int)
@click.option("--shape", type=click.Choice(SHAPE_CHOICES), default=None, help="Result shape of the greeting field")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the raw response envelope as JSON")
@click.pass_context
def cli_greeting(ctx: click.Context, greeting_id: int, shape: str | None, as_json: bool) -> None:
    """Look up one greeting by ID and print it.

    Exits with INVALID_ARGUMENT (22) when the service answers with an error.
    """
    cli_ctx = get_cli_context(ctx)
    result_shape = resolve_shape(resolve_settings(cli_ctx), shape)

    with lib_log_rich.runtime.bind(job_id="cli-greeting", extra={"command": "greeting", "greeting_id": greeting_id}):
        gateway = build_gateway_or_exit(cli_ctx, default_catalog(), result_shape)
        if as_json:
            envelope = gateway.execute(build_greeting_query(greeting_id, result_shape))
            click.echo(orjson.dumps(envelope.to_dict(), option=orjson.OPT_INDENT_2).decode())
            failed = not envelope.ok
        else:
            outcome = InProcessGreetingClient(gateway, result_shape).fetch(greeting_id)
            echo_outcome(outcome)
            failed = isinstance(outcome, GreetingFailure)

    if failed:
        raise SystemExit(ExitCode.INVALID_ARGUMENT)


@click.command("schema", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--shape", type=click.Choice(SHAPE_CHOICES), default=None, help="Result shape of the greeting field")
@click.pass_context
def cli_schema(ctx: click.Context, shape: str | None) -> None:
    """Print the GraphQL schema (SDL) the service would expose."""
    cli_ctx = get_cli_context(ctx)
    result_shape = resolve_shape(resolve_settings(cli_ctx), shape)
    gateway = build_gateway_or_exit(cli_ctx, default_catalog(), result_shape)
    logger.debug("Printing schema", extra={"result_shape": result_shape.value})
    click.echo(schema_sdl(gateway.schema))


__all__ = ["cli_greeting", "cli_schema"]
