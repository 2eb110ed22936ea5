"""
Base classes for the pCLI command system.

This module provides the base class that command units use to define their
commands, and the registration capability a command unit must expose so the
loader can hand it a registry.
"""

from typing import TYPE_CHECKING, Any, Generic, List, Protocol, TypeVar, runtime_checkable

from pcli.core.args import ArgInput

if TYPE_CHECKING:
    from pcli.core.cli.registry import CommandRegistry

ContextT = TypeVar("ContextT")


class Command(Generic[ContextT]):
    """
    Base class for pCLI commands.

    Subclasses declare their surface through class attributes and implement
    ``execute``. ``keywords`` must not be empty: each keyword becomes a
    registration key in the registry.
    """

    # registration keys, e.g. ["build", "b"]
    keywords: List[str] = []
    # one line per accepted form, e.g. ["build [target]"]
    usage: List[str] = []
    # one-line description shown in command listings
    summary: str = ""
    # full help text; falls back to the summary
    help_text: str = ""

    def get_keywords(self) -> List[str]:
        return list(self.keywords)

    def get_usage(self) -> List[str]:
        return list(self.usage)

    def get_summary(self) -> str:
        return self.summary

    def get_help_text(self) -> str:
        return self.help_text or self.summary

    async def execute(self, args: ArgInput, context: ContextT) -> Any:
        """
        Run the command.

        Args:
            args: The cursor, already advanced past the command keyword.
            context: Caller-supplied value passed through by the dispatcher.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keywords={self.get_keywords()!r})"


@runtime_checkable
class Registrar(Protocol):
    """Anything exposing a ``register(registry)`` entry point."""

    def register(self, registry: "CommandRegistry") -> None: ...


def is_command_module(value: Any) -> bool:
    """Return True if the object exposes a callable ``register`` entry point."""
    return value is not None and callable(getattr(value, "register", None))
