"""Greeting CLI command.

The root group invokes this command when no subcommand is given, so a bare
``greeter`` prints ``Hello, World from Go!``.

Contents:
    * :func:`cli_greet` - Write one greeting line to stdout.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter.application.greeting import greet
from greeter.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--name", type=str, default=None, help="Name to greet (default: [greeter] name, 'World')")
@click.option(
    "--runtime-label",
    type=str,
    default=None,
    help="Label printed after 'from' (default: [greeter] runtime_label, 'Go')",
)
@click.pass_context
def cli_greet(ctx: click.Context, name: str | None, runtime_label: str | None) -> None:
    """Print a greeting for the configured name.

    Options override the ``[greeter]`` configuration section; an empty
    ``--name ""`` is a valid name.
    """
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services

    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"}):
        try:
            settings = services.load_greeter_settings(cli_ctx.config.as_dict())
        except ConfigurationError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

        greeter = greet(settings, write=services.write_line, name=name, runtime_label=runtime_label)
        logger.info("Greeting written", extra={"greeted": greeter.name, "runtime_label": greeter.runtime_label})


__all__ = ["cli_greet"]
