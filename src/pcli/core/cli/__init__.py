"""
pCLI command system.

This package provides the keyword dispatch core. The main components are:
- Command: Base class for commands
- Registrar: Capability exposed by command units
- CommandRegistry: Keyword index and dispatcher
"""

from .base import Command, Registrar, is_command_module
from .registry import CommandRegistry

__all__ = ['Command', 'Registrar', 'CommandRegistry', 'is_command_module']
