"""Static package metadata surfaced to CLI commands and documentation.

The ``version`` line is kept in sync with ``pyproject.toml``; the
``LAYEREDCONF_*`` identifiers select the platform-specific configuration
directories used by :mod:`lib_layered_config`.
"""

from __future__ import annotations

name = "greeter"
title = "Greeter - prints a greeting for a configured name"
version = "1.0.0"
homepage = "https://github.com/greeter-dev/greeter"
author = "greeter developers"
author_email = "greeter-dev@users.noreply.github.com"
shell_command = "greeter"

# Identifiers for lib_layered_config path discovery
LAYEREDCONF_VENDOR = "greeter"
LAYEREDCONF_APP = "greeter"
LAYEREDCONF_SLUG = "greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
