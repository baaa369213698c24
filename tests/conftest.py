"""Shared pytest fixtures for CLI, adapter and module-entry tests.

Fixtures use descriptive names that read as plain English. CLI tests wire
production adapters and replace only the I/O boundary they assert on
(configuration source or console output).
"""

from __future__ import annotations

import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.adapters.memory.output import OutputSpy
    from greeter.composition import AppServices


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory."""
    if "COVERAGE_FILE" not in os.environ:
        os.environ["COVERAGE_FILE"] = str(Path(tempfile.gettempdir()) / ".coverage.greeter")


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _services_with(config: Config | None = None, spy: OutputSpy | None = None) -> AppServices:
    """Return production services with the config source and/or output swapped."""
    from greeter.composition import AppServices, build_production

    prod = build_production()

    def _fake_get_config(**_kwargs: Any) -> Config:
        assert config is not None
        return config

    return AppServices(
        get_config=_fake_get_config if config is not None else prod.get_config,
        display_config=prod.display_config,
        load_greeter_settings=prod.load_greeter_settings,
        init_logging=prod.init_logging,
        write_line=spy.write_line if spy is not None else prod.write_line,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when asserting on exact output so log records on
    stderr cannot interfere.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test."""
    from greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"greeter": {"name": "Ada"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "Ada" in result.output
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        services = _services_with(config=Config(config_data, {}))
        return lambda: services

    return _create


@dataclass
class GreetCliContext:
    """Container for greet CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: OutputSpy capturing every line the command writes.
    """

    factory: Callable[[], Any]
    spy: OutputSpy


@pytest.fixture
def greet_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any] | None], GreetCliContext]:
    """Create a greet CLI context with an output spy.

    Takes the ``[greeter]`` section contents, or None to keep the real
    layered configuration, and returns the factory plus spy.

    Example:
        def test_greet(cli_runner, greet_cli_context) -> None:
            ctx = greet_cli_context({"name": "Ada"})
            cli_runner.invoke(cli, ["greet"], obj=ctx.factory)
            assert ctx.spy.lines == ["Hello, Ada from Go!"]
    """
    from greeter.adapters.memory.output import OutputSpy as OutputSpyImpl

    def _create(greeter_section: dict[str, Any] | None = None) -> GreetCliContext:
        spy = OutputSpyImpl()
        config = None if greeter_section is None else Config({"greeter": greeter_section}, {})
        services = _services_with(config=config, spy=spy)
        return GreetCliContext(factory=lambda: services, spy=spy)

    return _create
