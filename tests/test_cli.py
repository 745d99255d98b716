import logging

import pytest
from click.testing import CliRunner

from transformdemo import cli as cli_module
from transformdemo.cli import cli

EXPECTED = (
    "approach 1:\n11 12 13 14 15 \n"
    "approach 2:\n11 12 13 14 15 \n"
    "approach 3:\n11 12 13 14 15 \n"
    "approach 4:\n11 12 13 14 15 \n"
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger("transformdemo")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_default_run_output_is_exact():
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 0
    assert result.stdout == EXPECTED
    assert result.stderr == ""


@pytest.mark.parametrize(
    "args",
    [
        ["extra", "--unknown", "7"],
        ["--help"],
        ["-h"],
        ["--", "x"],
    ],
)
def test_other_arguments_are_ignored(args):
    result = CliRunner().invoke(cli, args)
    assert result.exit_code == 0
    assert result.stdout == EXPECTED


@pytest.mark.parametrize(
    "args",
    [["--verbose"], ["-v"], ["--verbose=1"], ["--verbose=yes"], ["-v", "extra"]],
)
def test_verbose_logs_to_stderr_only(package_logger, args):
    result = CliRunner().invoke(cli, args)
    assert result.exit_code == 0
    assert result.stdout == EXPECTED
    assert "DEBUG" in result.stderr
    assert package_logger.level == logging.DEBUG


@pytest.mark.parametrize("args", [["--verbose=0"], ["--verbose=off"]])
def test_verbose_can_be_switched_off(package_logger, args):
    result = CliRunner().invoke(cli, args)
    assert result.exit_code == 0
    assert result.stdout == EXPECTED
    assert result.stderr == ""


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.stdout == "transformdemo, version 0.1.0\n"


def test_label_write_failure_exits_nonzero(monkeypatch):
    def broken_echo(*args, **kwargs):
        raise BrokenPipeError("stdout closed")

    monkeypatch.setattr(cli_module.click, "echo", broken_echo)
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 1
    assert "✗" in result.stderr


def test_data_line_write_failure_exits_nonzero(monkeypatch):
    real_echo = cli_module.click.echo
    written = []

    def echo_labels_only(message=None, *args, **kwargs):
        if not str(message).startswith("approach"):
            raise BrokenPipeError("stdout closed")
        written.append(message)
        real_echo(message, *args, **kwargs)

    monkeypatch.setattr(cli_module.click, "echo", echo_labels_only)
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 1
    assert written == ["approach 1:"]
    assert result.stdout == "approach 1:\n"
    assert "✗ Failed writing output" in result.stderr
