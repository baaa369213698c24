"""In-memory configuration adapters for testing.

Provides configuration functions that satisfy the same Protocols as
production adapters but operate entirely in memory -- no filesystem,
no layered discovery.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.settings import GreeterSettings, load_greeter_settings


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config; the greeter defaults then apply."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def load_greeter_settings_in_memory(config_dict: Mapping[str, Any]) -> GreeterSettings:
    """Validate the ``[greeter]`` section exactly like production."""
    return load_greeter_settings(config_dict)


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_greeter_settings_in_memory",
]
