from typing import Any

import click

from pcli import ArgInput, Command, CommandRegistry


class EchoCommand(Command[Any]):
    keywords = ["echo", "say"]
    usage = ["echo [words...]"]
    summary = "Print the remaining tokens"
    help_text = "Print every token after the keyword, separated by single spaces."

    async def execute(self, args: ArgInput, context: Any) -> None:
        words = []
        while not args.empty():
            words.append(args.next())
        click.echo(" ".join(words))


def register(registry: CommandRegistry) -> None:
    registry.add(EchoCommand())
