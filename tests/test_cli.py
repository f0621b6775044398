"""Tests for the root emailcheck CLI."""

from click.testing import CliRunner

from emailcheck import __version__
from emailcheck.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "emailcheck" in result.output
    assert "check" in result.output
    assert "prompt" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "emailcheck check user@example.com" in result.output


# --- Default action: prompt loop with banner ---


def test_no_args_runs_prompt(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [], input="user@example.com\n")
    assert result.exit_code == 0
    assert "=== Email Address Validation Program ===" in result.output
    assert "Please enter your email address:" in result.output
    assert "user@example.com" in result.output


def test_no_args_end_of_input_exits_1(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [], input="")
    assert result.exit_code == 1
    assert "Failed to read input" in result.output


def test_quiet_hides_banner(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q"], input="user@example.com\n")
    assert result.exit_code == 0
    assert "===" not in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--version"])
    assert result.exit_code == 0


def test_log_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--log-json", "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/does-not-exist.toml", "--version"])
    assert result.exit_code == 0


def test_unknown_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["frobnicate"])
    assert result.exit_code == 2
