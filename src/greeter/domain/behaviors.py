"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from .greeter import DEFAULT_NAME, RUNTIME_LABEL, Greeter

CANONICAL_GREETING = Greeter(DEFAULT_NAME).message()


def build_greeting(name: str = DEFAULT_NAME, runtime_label: str = RUNTIME_LABEL) -> str:
    r"""Return the greeting text for ``name``.

    Args:
        name: Value to greet. Defaults to ``"World"``.
        runtime_label: Label printed after ``from``. Defaults to ``"Go"``.

    Returns:
        The greeting string without a trailing newline.

    Example:
        >>> build_greeting()
        'Hello, World from Go!'
        >>> build_greeting("Ada")
        'Hello, Ada from Go!'
    """
    return Greeter(name, runtime_label=runtime_label).message()


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]
