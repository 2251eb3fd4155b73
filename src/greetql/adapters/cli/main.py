"""CLI entry point and execution wrapper.

Contents:
    * :func:`main` - Entry point shared by console scripts and ``python -m``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from greetql import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from greetql.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group and translate every outcome into an exit code.

    ``lib_cli_exit_tools.run_cli`` cannot pass ``obj``, so its behaviour is
    reproduced here with the services factory handed over as ``ctx.obj``.
    """
    import click

    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001
        # SystemExit and KeyboardInterrupt included: every exit is formatted the same way.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        apply_traceback_preferences(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: CLI arguments; ``sys.argv[1:]`` when None.
        restore_traceback: Restore the previous traceback flags afterwards.
        services_factory: Returns the wired AppServices. Required; callers
            outside the adapters layer pass ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from greetql.composition import build_production
        >>> main(["info"], services_factory=build_production)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Only the main thread may shut the runtime down; the listener thread logs through it.
        is_main_thread = threading.current_thread() is threading.main_thread()
        if is_main_thread and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
