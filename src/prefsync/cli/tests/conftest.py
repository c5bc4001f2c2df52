"""
CLI test fixtures and assertion helpers for prefsync.
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner, Result

from prefsync.cli.main import main


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner for testing."""
    return CliRunner()


def invoke_cli(runner: CliRunner, args: list[str], **kwargs) -> Result:
    """
    Run the prefsync command, letting unexpected exceptions propagate.

    Args:
        runner: Click test runner
        args: Command-line arguments
        **kwargs: Passed to runner.invoke() (e.g. input="1\\n")
    """
    return runner.invoke(main, args, catch_exceptions=False, **kwargs)


def assert_cli_success(result: Result) -> None:
    """Assert prefsync exited with code 0."""
    assert result.exit_code == 0, f"exit code {result.exit_code}\nOutput: {result.output}"


def assert_cli_failure(result: Result, expected_code: int = 1) -> None:
    """Assert prefsync exited with the given non-zero code."""
    assert result.exit_code == expected_code, (
        f"expected exit code {expected_code}, got {result.exit_code}\nOutput: {result.output}"
    )


def assert_output_contains(result: Result, text: str) -> None:
    """Assert the command output contains text."""
    assert text in result.output, f"{text!r} not in output:\n{result.output}"


def assert_json_output(result: Result) -> dict:
    """Parse the command output as JSON."""
    try:
        return json.loads(result.output)
    except json.JSONDecodeError as e:
        raise AssertionError(f"Output is not valid JSON: {e}\nOutput: {result.output}")
