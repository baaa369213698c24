"""In-memory logging adapter for greeter tests.

Stands in for :func:`greeter.adapters.logging.setup.init_logging` so the
greeting use case can run without starting the lib_log_rich runtime.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept the ``[lib_log_rich]`` config and leave the runtime untouched."""


__all__ = ["init_logging_in_memory"]
