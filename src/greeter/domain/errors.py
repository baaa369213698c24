"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[greeter]`` section holds values that cannot be used
    as text. Caught at the CLI boundary and reported with exit code 78.

    Example:
        >>> from greeter.domain.errors import ConfigurationError
        >>> err = ConfigurationError("greeter.name: Input should be a valid string")
        >>> str(err)
        'greeter.name: Input should be a valid string'
    """


__all__ = ["ConfigurationError"]
