import importlib.metadata
from typing import Any

import click

from pcli.core.args import ArgInput
from pcli.core.cli import Command, CommandRegistry


class VersionCommand(Command[Any]):
    keywords = ["version"]
    usage = ["version"]
    summary = "Show the installed pCLI version"

    async def execute(self, args: ArgInput, context: Any) -> None:
        click.echo(f"pcli {importlib.metadata.version('pcli')}")


def register(registry: CommandRegistry) -> None:
    registry.add(VersionCommand())
