import importlib.metadata

import pytest
from click.testing import CliRunner

from pcli.pcli_cli import cli, get_command_paths
from pcli.core.addons import BASE_COMMANDS_PATH
from pcli.core.models.config import AppConfig, CommandsConfig


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path, write_unit, echo_unit_source):
    """A config file pointing at a command directory holding an echo unit."""
    write_unit(tmp_path / "commands", echo_unit_source)
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "logger:\n"
        "  level: ERROR\n"
        "commands:\n"
        "  paths:\n"
        "    - ./commands\n"
    )
    return config_file


def test_command_paths_put_builtins_first():
    config = AppConfig(commands=CommandsConfig(paths=["/opt/commands"]))
    assert get_command_paths(config) == [BASE_COMMANDS_PATH, "/opt/commands"]

    config.commands.load_builtins = False
    assert get_command_paths(config) == ["/opt/commands"]


def test_dispatches_remaining_tokens_unparsed(runner, project):
    result = runner.invoke(cli, ["--config", str(project), "echo", "a", "--x", "-h"])

    assert result.exit_code == 0, result.output
    assert result.output == "a --x -h\n"


def test_bare_invocation_shows_help(runner, project):
    result = runner.invoke(cli, ["--config", str(project)])

    assert result.exit_code == 0, result.output
    assert "Available commands:" in result.output
    assert "echo [words...]" in result.output


def test_bare_invocation_without_help_command_is_silent(runner, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("commands:\n  load_builtins: false\n")

    result = runner.invoke(cli, ["--config", str(config_file)])

    assert result.exit_code == 0
    assert result.output == ""


def test_unknown_keyword_exits_with_error(runner, project):
    result = runner.invoke(cli, ["--config", str(project), "frobnicate"])

    assert result.exit_code == 2
    assert 'No command found for the keyword "frobnicate"' in result.output
    assert "pcli help" in result.output


def test_default_config_file_in_working_directory(runner, project, monkeypatch):
    monkeypatch.chdir(project.parent)

    result = runner.invoke(cli, ["echo", "hello"])

    assert result.exit_code == 0, result.output
    assert result.output == "hello\n"


def test_builtins_only_without_config(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(cli, ["version"])

    assert result.exit_code == 0, result.output
    assert result.output == f"pcli {importlib.metadata.version('pcli')}\n"


def test_missing_explicit_config_exits(runner, tmp_path):
    result = runner.invoke(cli, ["--config", str(tmp_path / "absent.yaml"), "help"])

    assert result.exit_code == 1


def test_malformed_unit_aborts_with_load_error(runner, tmp_path, write_unit):
    write_unit(tmp_path / "commands", "VALUE = 1\n")
    config_file = tmp_path / "config.yaml"
    config_file.write_text("commands:\n  paths:\n    - ./commands\n")

    result = runner.invoke(cli, ["--config", str(config_file), "help"])

    assert result.exit_code == 1


def test_command_receives_context(runner, tmp_path, write_unit):
    write_unit(
        tmp_path / "commands",
        """
        import click

        from pcli import Command


        class Inspect(Command):
            keywords = ["inspect"]

            async def execute(self, args, context):
                click.echo(sorted(context))
                click.echo(context["REGISTRY"].find("inspect") is self)


        def register(registry):
            registry.add(Inspect())
        """,
    )
    config_file = tmp_path / "config.yaml"
    config_file.write_text("commands:\n  paths:\n    - ./commands\n")

    result = runner.invoke(cli, ["--config", str(config_file), "inspect"])

    assert result.exit_code == 0, result.output
    assert result.output == "['CONFIG', 'CONFIG_PATH', 'REGISTRY']\nTrue\n"
