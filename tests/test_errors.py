"""Domain error types and exit codes."""

from __future__ import annotations

import pytest

from greeter.adapters.cli.exit_codes import ExitCode
from greeter.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    exc = ConfigurationError("greeter.name: Input should be a valid string")

    assert str(exc) == "greeter.name: Input should be a valid string"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "value"),
    [
        (ExitCode.SUCCESS, 0),
        (ExitCode.GENERAL_ERROR, 1),
        (ExitCode.INVALID_ARGUMENT, 22),
        (ExitCode.CONFIG_ERROR, 78),
    ],
)
def test_exit_code_values_follow_posix_conventions(member: ExitCode, value: int) -> None:
    """Every exit code keeps its documented integer value."""
    assert member == value
