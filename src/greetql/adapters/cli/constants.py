"""Shared CLI constants.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Shared Click settings for help display.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
    * :data:`EXIT_COMMAND` - Input that ends the interactive loop.
    * :data:`PROMPT` - Prompt shown by the interactive loop.
"""

from __future__ import annotations

from typing import Final

#: Shared Click context flags so help output stays consistent across commands.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

#: Literal input that ends the interactive loop without issuing a query.
EXIT_COMMAND: Final[str] = "exit"

#: Prompt shown before every identifier read.
PROMPT: Final[str] = "ID: "

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "EXIT_COMMAND",
    "PROMPT",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
