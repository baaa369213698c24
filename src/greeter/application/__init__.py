"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.greeting` - The greet use case
"""

from __future__ import annotations

from .greeting import greet
from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadGreeterSettings,
    WriteLine,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadGreeterSettings",
    "WriteLine",
    "greet",
]
