"""
Shared test fixtures for the pcli test suite.
"""

import sys
import textwrap
from pathlib import Path
from typing import Any, Callable, List

import pytest
from loguru import logger

from pcli.core.addons import UNIT_MODULE_PREFIX
from pcli.core.args import ArgInput
from pcli.core.cli import Command
from pcli.core.settings import reset_config


class RecordingCommand(Command[Any]):
    """Command that records the cursor state and context it was executed with."""

    def __init__(self, *keywords: str, result: Any = None) -> None:
        self.keywords = list(keywords)
        self.usage = [f"{keywords[0]} [args...]"]
        self.summary = f"Recording command {keywords[0]}"
        self.result = result
        self.calls: List[tuple] = []

    async def execute(self, args: ArgInput, context: Any) -> Any:
        self.calls.append((args.position, args.remaining, args.current, context))
        return self.result


@pytest.fixture
def recording_command():
    """Factory for commands that record their executions."""
    return RecordingCommand


@pytest.fixture(autouse=True)
def isolated_settings():
    """Drop cached configuration and loguru sinks between tests."""
    reset_config()
    yield
    reset_config()
    logger.remove()


@pytest.fixture
def write_unit() -> Callable[..., str]:
    """Write ``<name>.py`` into a command directory and return the unit name.

    Unit modules loaded during the test are dropped from ``sys.modules`` afterwards.
    """

    def _write(directory: Path, source: str, name: str = "unit") -> str:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / f"{name}.py").write_text(textwrap.dedent(source), encoding="utf-8")
        return name

    yield _write

    for module_name in [m for m in sys.modules if m.startswith(UNIT_MODULE_PREFIX)]:
        del sys.modules[module_name]


ECHO_UNIT = """
from typing import Any

import click

from pcli import ArgInput, Command, CommandRegistry


class EchoCommand(Command[Any]):
    keywords = ["echo"]
    usage = ["echo [words...]"]
    summary = "Print the remaining tokens"

    async def execute(self, args: ArgInput, context: Any) -> None:
        words = []
        while not args.empty():
            words.append(args.next())
        click.echo(" ".join(words))


def register(registry: CommandRegistry) -> None:
    registry.add(EchoCommand())
"""


@pytest.fixture
def echo_unit_source() -> str:
    return ECHO_UNIT
