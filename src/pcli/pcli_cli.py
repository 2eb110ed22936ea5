"""
Main CLI interface for the pCLI dispatcher.

This module provides the ``pcli`` console entry point. It reads the configuration,
initializes logging, loads the built-in and configured command directories into a
fresh registry, and dispatches the remaining command-line tokens.

Everything after the driver's own options is handed to the registry untouched,
so option-looking tokens (``--x``) reach the selected command.
"""

import sys
from typing import Any, Dict, List

import anyio
import click
from loguru import logger

from pcli.core.addons import BASE_COMMANDS_PATH, create_registry
from pcli.core.args import ArgInput
from pcli.core.cli import CommandRegistry
from pcli.core.exceptions import CommandNotFoundError, MalformedCommandModuleError
from pcli.core.logger import setup_logging
from pcli.core.models.config import AppConfig
from pcli.core.settings import get_config

EXIT_LOAD_ERROR = 1
EXIT_COMMAND_NOT_FOUND = 2


def get_command_paths(config: AppConfig) -> List[str]:
    """Directories to load, built-ins first so configured commands can override them."""
    paths = [BASE_COMMANDS_PATH] if config.commands.load_builtins else []
    return paths + list(config.commands.paths)


def init_logging_and_config(ctx: click.Context) -> None:
    if "CONFIG" not in ctx.obj:
        try:
            ctx.obj["CONFIG"] = get_config(ctx.obj["CONFIG_PATH"])
            setup_logging(ctx.obj["CONFIG"].logger)
        except Exception as e:
            logger.critical(f"Error initializing system: {e}")
            sys.exit(EXIT_LOAD_ERROR)


def build_registry(config: AppConfig) -> CommandRegistry:
    try:
        return create_registry(get_command_paths(config))
    except (MalformedCommandModuleError, ImportError) as e:
        logger.critical(f"Command loading failed: {e}")
        sys.exit(EXIT_LOAD_ERROR)


async def run_command(
    registry: CommandRegistry, args: ArgInput, context: Dict[str, Any]
) -> Any:
    """
    Dispatch ``args`` on ``registry``.

    A bare invocation runs the help command when one is designated; otherwise it
    is left to the registry, which treats it as a no-op.
    """
    help_command = registry.get_help_command()
    if args.empty() and help_command is not None:
        return await help_command.execute(args, context)
    return await registry.dispatch(args, context)


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.option(
    "--config",
    default=None,
    help="Path to configuration file (default: ./config.yaml if present)",
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, config: str | None, tokens: tuple[str, ...]) -> None:
    """
    Run the command selected by the first token, passing it the remaining tokens.
    """
    ctx.ensure_object(dict)
    ctx.obj["CONFIG_PATH"] = config
    init_logging_and_config(ctx)

    registry = build_registry(ctx.obj["CONFIG"])
    ctx.obj["REGISTRY"] = registry

    try:
        anyio.run(run_command, registry, ArgInput(tokens), ctx.obj)
    except CommandNotFoundError as e:
        click.echo(f"Error: {e.message}", err=True)
        if registry.get_help_command() is not None:
            click.echo("Run 'pcli help' to list the available commands.", err=True)
        sys.exit(EXIT_COMMAND_NOT_FOUND)


if __name__ == "__main__":
    cli()
