"""Console output adapter writing greeting lines to standard output."""

from __future__ import annotations

import click


def write_line(line: str) -> None:
    """Write ``line`` plus a newline to stdout.

    ``click.echo`` resolves the current stdout on every call, so
    ``CliRunner`` and ``capsys`` capture the output. Write errors such as a
    closed pipe propagate to the caller.

    Example:
        >>> write_line("Hello, World from Go!")
        Hello, World from Go!
    """
    click.echo(line)


__all__ = ["write_line"]
