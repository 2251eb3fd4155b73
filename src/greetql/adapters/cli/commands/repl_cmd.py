"""``repl`` command: serve and query greetings interactively from stdin.

Contents:
    * :func:`run_greeting_loop` - The prompt loop, independent of Click.
    * :func:`cli_repl` - Starts the listener, runs the loop, drains.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable

import lib_log_rich.runtime
import rich_click as click

from greetql.application.ports import GreetingClient
from greetql.domain.catalog import default_catalog
from greetql.domain.enums import ClientTransport
from greetql.domain.errors import ShutdownRequested, TransportError

from ..constants import CLICK_CONTEXT_SETTINGS, EXIT_COMMAND, PROMPT
from ..context import get_cli_context
from ._shared import (
    SHAPE_CHOICES,
    build_gateway_or_exit,
    drain_listener,
    echo_outcome,
    resolve_settings,
    resolve_shape,
    start_listener_or_exit,
)

logger = logging.getLogger(__name__)


def run_greeting_loop(
    client: GreetingClient,
    *,
    catalog_size: int,
    read_line: Callable[[str], str] | None = None,
    echo: Callable[[str], None] = click.echo,
) -> int:
    """Prompt for identifiers until ``exit`` or end of input.

    Non-numeric input is answered with a hint and never reaches the client.
    Transport failures are logged and the loop carries on.

    Args:
        client: Where queries go.
        catalog_size: Upper identifier bound shown in hints.
        read_line: Prompt-and-read function, ``input`` when None.
        echo: Output function.

    Returns:
        Number of queries sent.

    Example:
        >>> from greetql.domain.results import GreetingFailure
        >>> class Client:
        ...     def fetch(self, greeting_id): return GreetingFailure((f"no {greeting_id}",))
        ...     def close(self): pass
        >>> answers = iter(["abc", "42", "exit"])
        >>> out: list[str] = []
        >>> run_greeting_loop(Client(), catalog_size=10, read_line=lambda _: next(answers), echo=out.append)
        1
        >>> out[1:]
        ['Please enter a number from 1 to 10', 'Error: no 42', 'Shutting down.']
    """
    echo(
        f"Enter a greeting ID (1 to {catalog_size}) to fetch its text. "
        f"Type '{EXIT_COMMAND}' or press Ctrl+C to quit."
    )
    read = input if read_line is None else read_line
    sent = 0
    while True:
        try:
            text = read(PROMPT).strip()
        except EOFError:
            echo("")
            break
        if text == EXIT_COMMAND:
            echo("Shutting down.")
            break
        try:
            greeting_id = int(text)
        except ValueError:
            echo(f"Please enter a number from 1 to {catalog_size}")
            continue

        sent += 1
        try:
            outcome = client.fetch(greeting_id)
        except TransportError as exc:
            logger.error("Query for greeting %d failed: %s", greeting_id, exc)
            continue
        echo_outcome(outcome, echo)
    return sent


@click.command("repl", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--shape", type=click.Choice(SHAPE_CHOICES), default=None, help="Result shape of the greeting field")
@click.option(
    "--loopback/--in-process",
    default=None,
    help="Send queries over HTTP to the listener instead of calling the gateway directly",
)
@click.pass_context
def cli_repl(ctx: click.Context, shape: str | None, loopback: bool | None) -> None:
    """Start the server and read greeting IDs from stdin until 'exit'."""
    cli_ctx = get_cli_context(ctx)
    settings = resolve_settings(cli_ctx)
    if loopback is not None:
        transport = ClientTransport.HTTP if loopback else ClientTransport.IN_PROCESS
        settings = dataclasses.replace(settings, client=settings.client.model_copy(update={"transport": transport}))
    result_shape = resolve_shape(settings, shape)
    catalog = default_catalog()

    extra = {"command": "repl", "transport": settings.client.transport.value, "result_shape": result_shape.value}
    with lib_log_rich.runtime.bind(job_id="cli-repl", extra=extra):
        gateway = build_gateway_or_exit(cli_ctx, catalog, result_shape)
        listener = cli_ctx.services.create_listener(gateway, settings.server)
        start_listener_or_exit(listener)
        click.echo(f"GraphQL server listening on {listener.base_url}")
        listener.install_signal_handlers(interrupt=True)

        # Signals can arrive at any point before the drain.
        try:
            client = cli_ctx.services.open_client(gateway, result_shape, settings.client, listener.base_url)
            try:
                run_greeting_loop(client, catalog_size=len(catalog))
            finally:
                client.close()
        except (ShutdownRequested, KeyboardInterrupt):
            click.echo("")
            logger.info("Interactive loop interrupted")
        finally:
            listener.request_stop()
            drain_listener(listener)


__all__ = ["cli_repl", "run_greeting_loop"]
