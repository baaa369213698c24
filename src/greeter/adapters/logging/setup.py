"""Centralized logging initialization for all entry points.

Maps the ``[lib_log_rich]`` configuration section onto
``lib_log_rich.runtime.RuntimeConfig`` and initialises the runtime exactly
once per process, whichever entry point (console script, ``python -m``,
tests) gets there first.

Contents:
    * :class:`LoggingConfigModel` - boundary model for the config section.
    * :func:`init_logging` - idempotent runtime initialisation.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greeter import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Unknown keys are kept and forwarded to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel(service="greeter", console_level="DEBUG").model_dump(exclude_none=True)
        {'service': 'greeter', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Build a RuntimeConfig from the ``[lib_log_rich]`` section.

    An empty or missing ``service`` falls back to the package name.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime from ``config``.

    The first call loads ``.env`` files (so ``LOG_*`` variables apply),
    initialises the runtime and bridges stdlib :mod:`logging` into it.
    Later calls return immediately.

    Args:
        config: Loaded layered configuration holding the ``[lib_log_rich]``
            section.

    Example:
        >>> config = Config({"lib_log_rich": {"environment": "test"}}, {})
        >>> init_logging(config)  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
