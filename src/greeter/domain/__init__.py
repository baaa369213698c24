"""Domain layer - pure business logic with no framework dependencies.

Contents:
    * :mod:`.greeter` - The Greeter entity and its constants
    * :mod:`.behaviors` - Greeting helper functions
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)
from .enums import OutputFormat
from .errors import ConfigurationError
from .greeter import DEFAULT_NAME, GREETING_TEMPLATE, RUNTIME_LABEL, Greeter

__all__ = [
    # Entity
    "DEFAULT_NAME",
    "GREETING_TEMPLATE",
    "RUNTIME_LABEL",
    "Greeter",
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
