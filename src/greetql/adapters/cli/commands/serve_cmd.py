"""``serve`` command: run the listener until a termination signal."""

from __future__ import annotations

import dataclasses
import logging

import lib_log_rich.runtime
import rich_click as click

from greetql.domain.catalog import default_catalog

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import (
    SHAPE_CHOICES,
    build_gateway_or_exit,
    drain_listener,
    resolve_settings,
    resolve_shape,
    start_listener_or_exit,
)

logger = logging.getLogger(__name__)


@click.command("serve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--host", type=str, default=None, help="Interface to bind (overrides server.host)")
@click.option(
    "--port",
    type=click.IntRange(0, 65535),
    default=None,
    help="Port to bind (overrides server.port and PORT)",
)
@click.option("--shape", type=click.Choice(SHAPE_CHOICES), default=None, help="Result shape of the greeting field")
@click.pass_context
def cli_serve(ctx: click.Context, host: str | None, port: int | None, shape: str | None) -> None:
    """Serve the GraphQL endpoint until SIGINT or SIGTERM, then drain and stop."""
    cli_ctx = get_cli_context(ctx)
    settings = resolve_settings(cli_ctx)
    server_updates = {key: value for key, value in (("host", host), ("port", port)) if value is not None}
    server_settings = settings.server.model_copy(update=server_updates)
    settings = dataclasses.replace(settings, server=server_settings)
    result_shape = resolve_shape(settings, shape)

    extra = {"command": "serve", "port": server_settings.port, "result_shape": result_shape.value}
    with lib_log_rich.runtime.bind(job_id="cli-serve", extra=extra):
        gateway = build_gateway_or_exit(cli_ctx, default_catalog(), result_shape)
        listener = cli_ctx.services.create_listener(gateway, server_settings)
        start_listener_or_exit(listener)
        click.echo(f"GraphQL server listening on {listener.base_url}")
        if server_settings.graphiql:
            click.echo(f"GraphiQL available at {listener.base_url}")
        listener.install_signal_handlers()
        try:
            listener.wait()
        except KeyboardInterrupt:
            logger.info("Interrupted")
        drain_listener(listener)


__all__ = ["cli_serve"]
