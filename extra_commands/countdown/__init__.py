"""Example package-style command unit."""

from typing import Any

import anyio
import click

from pcli import ArgInput, Command, CommandRegistry


class CountdownCommand(Command[Any]):
    keywords = ["countdown"]
    usage = ["countdown <seconds>"]
    summary = "Count down from the given number of seconds"

    async def execute(self, args: ArgInput, context: Any) -> None:
        value = args.next()
        if value is None or not value.isdigit():
            raise click.UsageError("countdown expects a whole number of seconds")

        for remaining in range(int(value), 0, -1):
            click.echo(remaining)
            await anyio.sleep(1)
        click.echo("done")


def register(registry: CommandRegistry) -> None:
    registry.add(CountdownCommand())
