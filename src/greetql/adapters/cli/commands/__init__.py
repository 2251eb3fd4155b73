"""CLI command implementations.

Contents:
    * Service commands from :mod:`.serve_cmd` and :mod:`.repl_cmd`
    * One-shot query commands from :mod:`.query_cmd`
    * Config command from :mod:`.config`
    * Info command from :mod:`.info`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .query_cmd import cli_greeting, cli_schema
from .repl_cmd import cli_repl
from .serve_cmd import cli_serve

__all__ = [
    "cli_config",
    "cli_greeting",
    "cli_info",
    "cli_repl",
    "cli_schema",
    "cli_serve",
]
