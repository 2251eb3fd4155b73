"""Static package metadata surfaced to CLI commands and documentation.

Values here are kept in sync with ``pyproject.toml``. The ``LAYEREDCONF_*``
identifiers decide where lib_layered_config looks for configuration files.
"""

from __future__ import annotations

#: Distribution name as published on the index.
name = "greetql"
#: One-line description used as CLI help title.
title = "GraphQL greeting lookup service with an interactive query loop"
#: Current release.
version = "1.0.0"
#: Console script name.
shell_command = "greetql"

#: Vendor directory used on macOS/Windows configuration paths.
LAYEREDCONF_VENDOR = "greetql"
#: Application directory used on macOS/Windows configuration paths.
LAYEREDCONF_APP = "greetql"
#: Slug used for XDG paths and the ``GREETQL___`` environment prefix.
LAYEREDCONF_SLUG = "greetql"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greetql:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
        ("config_slug", LAYEREDCONF_SLUG),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
