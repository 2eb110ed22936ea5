"""
Command registry for pCLI.

This module provides the registry that maps keywords to commands and drives
their execution. A registry is populated once (directly through ``add`` or by
command units through ``register``) and then used as a static lookup table.

Registration and dispatch are separate phases: adding commands while a dispatch
is in progress is undefined behavior and must be avoided by the caller. No
locking is performed.
"""

from typing import Any, Dict, Generic, List, Optional, Tuple

from loguru import logger

from pcli.core.args import ArgInput
from pcli.core.cli.base import Command, ContextT, Registrar
from pcli.core.exceptions import CommandNotFoundError


class CommandRegistry(Generic[ContextT]):
    """Registry of commands indexed by keyword."""

    def __init__(self) -> None:
        self._commands: List[Command[ContextT]] = []
        self._keywords: Dict[str, Command[ContextT]] = {}
        self._help_command: Optional[Command[ContextT]] = None

    @property
    def commands(self) -> Tuple[Command[ContextT], ...]:
        """Registered commands in registration order."""
        return tuple(self._commands)

    def add(self, command: Command[ContextT]) -> None:
        """
        Register a command under each of its keywords.

        Adding an instance that is already registered does nothing. A keyword
        already owned by another command is taken over by the new one.

        Args:
            command: The command to register

        Raises:
            ValueError: If the command reports no keywords
        """
        if not command.get_keywords():
            raise ValueError(f"Command {type(command).__name__} must have at least one keyword")

        if any(registered is command for registered in self._commands):
            return

        self._commands.append(command)

        for keyword in command.get_keywords():
            previous = self._keywords.get(keyword)
            if previous is not None and previous is not command:
                logger.debug(
                    f"Keyword '{keyword}' reassigned from {previous!r} to {command!r}"
                )
            self._keywords[keyword] = command

    def register(self, registrar: Registrar) -> None:
        """
        Let a command unit populate this registry.

        Args:
            registrar: Any object exposing ``register(registry)``

        Raises:
            TypeError: If the object has no ``register`` attribute
        """
        if not isinstance(registrar, Registrar):
            raise TypeError(f"{registrar!r} does not expose a register() function")
        registrar.register(self)

    def find(self, keyword: str) -> Optional[Command[ContextT]]:
        return self._keywords.get(keyword)

    def keywords(self) -> List[str]:
        return list(self._keywords)

    def get_help_command(self) -> Optional[Command[ContextT]]:
        return self._help_command

    def set_help_command(self, command: Optional[Command[ContextT]]) -> None:
        """Designate the help command. The command is not registered by this call."""
        self._help_command = command

    async def dispatch(self, args: ArgInput, context: ContextT) -> Any:
        """
        Consume a keyword from ``args`` and run the matching command.

        An exhausted cursor is a no-op. Whatever the command returns or raises
        is passed through unchanged.

        Args:
            args: Cursor positioned at the keyword
            context: Value handed to the command's ``execute``

        Returns:
            The command's result, or None when there was no keyword

        Raises:
            CommandNotFoundError: If no command owns the keyword
        """
        keyword = args.next()

        if not keyword:
            return None

        command = self.find(keyword)

        if command is None:
            raise CommandNotFoundError(keyword)

        logger.debug(f"Dispatching '{keyword}' to {command!r}")
        return await command.execute(args, context)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._keywords

    def __len__(self) -> int:
        return len(self._commands)
