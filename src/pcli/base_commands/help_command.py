"""Built-in ``help`` command: lists commands or shows one command's help text."""

from typing import Any, List

import click

from pcli.core.args import ArgInput
from pcli.core.cli import Command, CommandRegistry
from pcli.core.exceptions import CommandNotFoundError


class HelpCommand(Command[Any]):
    keywords = ["help", "?"]
    usage = ["help", "help <command>"]
    summary = "Show available commands or details for a single command"
    help_text = (
        "Without arguments, list every registered command with its usage and summary.\n"
        "With a command keyword, show the usage lines and full help text of that command."
    )

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    def render_overview(self) -> str:
        rows = []
        for command in self.registry.commands:
            usage = command.get_usage()
            rows.append((usage[0] if usage else command.get_keywords()[0], command.get_summary()))

        width = max((len(form) for form, _ in rows), default=0)
        lines = ["Available commands:"]
        lines.extend(f"  {form.ljust(width)}  {summary}".rstrip() for form, summary in rows)
        return "\n".join(lines)

    def render_command(self, command: Command[Any]) -> str:
        lines: List[str] = ["Usage:"]
        lines.extend(f"  {form}" for form in command.get_usage() or command.get_keywords())
        aliases = command.get_keywords()
        if len(aliases) > 1:
            lines.append(f"Aliases: {', '.join(aliases)}")
        lines.append("")
        lines.append(command.get_help_text())
        return "\n".join(lines)

    async def execute(self, args: ArgInput, context: Any) -> None:
        keyword = args.next()

        if keyword is None:
            click.echo(self.render_overview())
            return

        command = self.registry.find(keyword)
        if command is None:
            raise CommandNotFoundError(keyword)

        click.echo(self.render_command(command))


def register(registry: CommandRegistry) -> None:
    command = HelpCommand(registry)
    registry.add(command)
    registry.set_help_command(command)
