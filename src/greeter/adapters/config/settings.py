"""Greeter settings model and loader.

Provides the GreeterSettings Pydantic model for the ``[greeter]`` section and
the loader that validates it at the configuration boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from greeter.domain.errors import ConfigurationError
from greeter.domain.greeter import DEFAULT_NAME, RUNTIME_LABEL


class GreeterSettings(BaseModel):
    """Validated, immutable ``[greeter]`` settings.

    Numbers are accepted and turned into text, so ``--set greeter.name=42``
    greets ``42``. Any other non-string value is rejected.

    Example:
        >>> GreeterSettings().name
        'World'
        >>> GreeterSettings(name=42).name
        '42'
        >>> GreeterSettings(runtime_label="Python").runtime_label
        'Python'
    """

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    name: str = DEFAULT_NAME
    runtime_label: str = RUNTIME_LABEL


def _describe(exc: ValidationError) -> str:
    """Flatten a ValidationError into ``greeter.<field>: <message>`` lines."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        prefix = f"greeter.{location}" if location else "greeter"
        parts.append(f"{prefix}: {error['msg']}")
    return "; ".join(parts)


def load_greeter_settings(config_dict: Mapping[str, Any]) -> GreeterSettings:
    """Load GreeterSettings from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary, typically ``Config.as_dict()``.
            A missing ``greeter`` section yields the defaults.

    Returns:
        Validated settings.

    Raises:
        ConfigurationError: If the section is not a table or holds values
            that cannot be used as text.

    Example:
        >>> load_greeter_settings({"greeter": {"name": "Ada"}}).name
        'Ada'
        >>> load_greeter_settings({}).runtime_label
        'Go'
    """
    section: Any = config_dict.get("greeter", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"greeter: expected a table, got {type(section).__name__}")
    try:
        return GreeterSettings.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc


__all__ = [
    "GreeterSettings",
    "load_greeter_settings",
]
