"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 143) are informational only; ``lib_cli_exit_tools``
translates signals into exit codes itself.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    * 0-1: generic success / failure
    * 22: EINVAL, a query answered with an error
    * 69: EX_UNAVAILABLE, the listener could not bind
    * 70: EX_SOFTWARE, the schema could not be built
    * 78: EX_CONFIG, invalid configuration
    * 110: ETIMEDOUT, drain timeout exceeded
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.BIND_FAILURE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    BIND_FAILURE = 69
    SCHEMA_ERROR = 70
    CONFIG_ERROR = 78
    TIMEOUT = 110
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
