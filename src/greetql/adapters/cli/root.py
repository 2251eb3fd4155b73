"""Root CLI command group and global option handling.

Defines the top-level Click command group that serves as the entry point for
all subcommands. Handles global flags like --traceback, --profile, and --set.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greetql import __init__conf__
from greetql.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from greetql.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, raising UsageError on failure.

    Raises:
        click.UsageError: If any override string is malformed.
    """
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Read configuration from profile/<NAME>/ under each config directory",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. server.port=9000.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Root command storing global flags and the loaded configuration.

    Loads configuration once with the profile, applies any ``--set`` overrides,
    initialises logging and stores everything in the Click context for the
    subcommands.

    Example:
        >>> from click.testing import CliRunner
        >>> from greetql.composition import build_testing
        >>> result = CliRunner().invoke(cli, [], obj=build_testing)
        >>> result.exit_code
        0
        >>> "greeting" in result.output
        True
    """
    if not callable(ctx.obj):
        raise RuntimeError("greetql CLI invoked without a services factory in ctx.obj")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred import: command modules import from package ancestors that import this module.
def _register_commands() -> None:
    from .commands import cli_config, cli_greeting, cli_info, cli_repl, cli_schema, cli_serve

    for cmd in (cli_serve, cli_repl, cli_greeting, cli_schema, cli_config, cli_info):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
