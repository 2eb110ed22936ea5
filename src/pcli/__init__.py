"""
pCLI: keyword-based command dispatch.

Commands are looked up by the first command-line token and receive a cursor over
the tokens that follow it.
"""

from pcli.core.args import ArgInput
from pcli.core.cli import Command, CommandRegistry, Registrar
from pcli.core.exceptions import (
    CommandNotFoundError,
    MalformedCommandModuleError,
    PCLIException,
)

__all__ = [
    "ArgInput",
    "Command",
    "CommandNotFoundError",
    "CommandRegistry",
    "MalformedCommandModuleError",
    "PCLIException",
    "Registrar",
]
