"""Configuration adapter - loading, display, overrides, and settings.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - ``[greeter]`` section model and loader
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import GreeterSettings, load_greeter_settings

__all__ = [
    "GreeterSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_greeter_settings",
]
