"""Output adapter - writes program output to the console.

Contents:
    * :func:`.console.write_line` - Line writer backed by ``click.echo``
"""

from __future__ import annotations

from .console import write_line

__all__ = ["write_line"]
