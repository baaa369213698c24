"""Greeter entity: holds a name and writes a greeting line for it."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

#: Name used when nothing else is configured.
DEFAULT_NAME: Final[str] = "World"

#: Display label naming the runtime that produced the greeting.
RUNTIME_LABEL: Final[str] = "Go"

GREETING_TEMPLATE: Final[str] = "Hello, {name} from {runtime_label}!"


def _write_stdout(line: str) -> None:
    sys.stdout.write(f"{line}\n")


@dataclass(frozen=True, slots=True)
class Greeter:
    """Immutable holder of a name that can greet it.

    Any string is accepted as ``name``, including the empty string.

    Attributes:
        name: Value interpolated into the greeting.
        runtime_label: Label printed after ``from``.

    Example:
        >>> Greeter("World").message()
        'Hello, World from Go!'
        >>> Greeter("", runtime_label="Python").message()
        'Hello,  from Python!'
    """

    name: str
    runtime_label: str = RUNTIME_LABEL

    def message(self) -> str:
        """Return the greeting text without a trailing newline."""
        return GREETING_TEMPLATE.format(name=self.name, runtime_label=self.runtime_label)

    def greet(self, write: Callable[[str], None] | None = None) -> None:
        """Write the greeting as one line.

        Args:
            write: Line writer receiving the message without newline. When
                None, the line is written to ``sys.stdout``.

        Raises:
            OSError: When the output stream rejects the write. Not handled
                here; the CLI boundary maps it to an exit code.

        Example:
            >>> Greeter("World").greet()
            Hello, World from Go!
        """
        (write or _write_stdout)(self.message())


__all__ = [
    "DEFAULT_NAME",
    "GREETING_TEMPLATE",
    "RUNTIME_LABEL",
    "Greeter",
]
