"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_greeter_settings

# Logging services
from ..adapters.logging.setup import init_logging

# Output services
from ..adapters.output.console import write_line

# Static conformance assertions checked by pyright.
if TYPE_CHECKING:
    from ..adapters.memory.output import OutputSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadGreeterSettings,
        WriteLine,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_greeter_settings: LoadGreeterSettings = load_greeter_settings
    _assert_init_logging: InitLogging = init_logging
    _assert_write_line: WriteLine = write_line


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_greeter_settings: LoadGreeterSettings
    init_logging: InitLogging
    write_line: WriteLine


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_greeter_settings=load_greeter_settings,
        init_logging=init_logging,
        write_line=write_line,
    )


def build_testing(*, spy: OutputSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional OutputSpy capturing written lines. When None, a fresh
            OutputSpy is created. Pass your own spy to assert on output.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        OutputSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_greeter_settings_in_memory,
    )

    output_spy = spy if spy is not None else OutputSpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_greeter_settings=load_greeter_settings_in_memory,
        init_logging=init_logging_in_memory,
        write_line=output_spy.write_line,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    "load_greeter_settings",
    # Logging
    "init_logging",
    # Output
    "write_line",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
