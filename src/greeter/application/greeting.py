"""Greeting use case: build a Greeter from settings and greet once."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..domain.greeter import Greeter

if TYPE_CHECKING:
    from ..adapters.config.settings import GreeterSettings
    from .ports import WriteLine


def greet(
    settings: GreeterSettings,
    *,
    write: WriteLine,
    name: str | None = None,
    runtime_label: str | None = None,
) -> Greeter:
    """Construct a Greeter and write its greeting through ``write``.

    Explicit ``name`` and ``runtime_label`` arguments take precedence over
    the configured settings. An empty string is a valid explicit value.

    Args:
        settings: Validated ``[greeter]`` configuration section.
        write: Line writer port receiving the greeting.
        name: Optional name overriding ``settings.name``.
        runtime_label: Optional label overriding ``settings.runtime_label``.

    Returns:
        The Greeter that produced the line.

    Example:
        >>> from greeter.adapters.config.settings import GreeterSettings
        >>> lines: list[str] = []
        >>> greet(GreeterSettings(), write=lines.append, name="Ada").name
        'Ada'
        >>> lines
        ['Hello, Ada from Go!']
    """
    greeter = Greeter(
        name=settings.name if name is None else name,
        runtime_label=settings.runtime_label if runtime_label is None else runtime_label,
    )
    greeter.greet(write)
    return greeter


__all__ = ["greet"]
