"""Public package surface exposing the Greeter, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: the Greeter entity and greeting helpers
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)
from .domain.greeter import Greeter

__all__ = [
    "CANONICAL_GREETING",
    "Greeter",
    "build_greeting",
    "get_config",
    "print_info",
]
