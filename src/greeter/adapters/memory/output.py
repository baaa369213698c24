"""In-memory output adapter for testing.

Contents:
    * :class:`OutputSpy` - Captures written lines for test assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _empty_line_list() -> list[str]:
    """Create an empty typed list for captured lines."""
    return []


@dataclass
class OutputSpy:
    """Captures lines written through the WriteLine port.

    Each test should create its own OutputSpy instance to avoid cross-test
    pollution.

    Attributes:
        lines: Captured lines, without trailing newlines.
        raise_exception: When set, ``write_line`` raises this exception
            instead of recording, simulating a closed output stream.

    Example:
        >>> spy = OutputSpy()
        >>> spy.write_line("Hello, World from Go!")
        >>> spy.lines
        ['Hello, World from Go!']
        >>> spy.text
        'Hello, World from Go!\\n'
    """

    lines: list[str] = field(default_factory=_empty_line_list)
    raise_exception: Exception | None = None

    @property
    def text(self) -> str:
        """Return captured output as it would appear on stdout."""
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.lines.clear()
        self.raise_exception = None

    def write_line(self, line: str) -> None:
        """Record ``line`` or raise the configured exception."""
        if self.raise_exception is not None:
            raise self.raise_exception
        self.lines.append(line)


__all__ = ["OutputSpy"]
