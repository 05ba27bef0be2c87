"""
Tests for the exception-workshop CLI.

Uses click's CliRunner to invoke commands in-process.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from exception_workshop.cli import cli
from exception_workshop.utils.logging_helpers import PACKAGE_LOGGER


@pytest.fixture
def runner(clean_env):
    """CliRunner with a clean environment and restored package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (logger.level, list(logger.handlers), logger.propagate)

    yield CliRunner()

    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def run_json(runner, *args):
    result = runner.invoke(cli, ["run", *args, "--format", "json"])
    # Log records may precede the JSON document on the combined output
    return result, json.loads(result.output.strip().splitlines()[-1])


class TestListCommands:
    """Test list and kinds commands."""

    def test_list(self, runner):
        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0
        assert "reverse_text" in result.output
        assert "parse_int" in result.output

    def test_kinds(self, runner):
        result = runner.invoke(cli, ["kinds"])

        assert result.exit_code == 0
        assert "null_input" in result.output
        assert "DivisionByZeroError" in result.output


class TestRunCommand:
    """Test running operations from the command line."""

    def test_success_text(self, runner):
        result = runner.invoke(cli, ["run", "reverse-text", "-i", '{"text": "strawberry"}'])

        assert result.exit_code == 0
        assert "yrrebwarts" in result.output

    def test_failure_text(self, runner):
        result = runner.invoke(
            cli, ["run", "divide-numbers", "-i", '{"dividend": 125, "divisor": 0}']
        )

        assert result.exit_code == 1
        assert "[division_by_zero]" in result.output
        assert "Cannot divide by zero" in result.output

    def test_success_json(self, runner):
        result, payload = run_json(runner, "parse_int", "-i", '{"text": "619"}')

        assert result.exit_code == 0
        assert payload["ok"] is True
        assert payload["value"] == 619

    def test_failure_json(self, runner):
        result, payload = run_json(
            runner, "get-element-as-number", "-i",
            '{"values": {"Ani": "20", "Martin": "25"}, "key": "Maria"}',
        )

        assert result.exit_code == 1
        assert payload["ok"] is False
        assert payload["error_kind"] == "key_not_found"

    def test_bits_option(self, runner):
        result, payload = run_json(
            runner, "add-numbers", "--bits", "8", "-i", '{"a": 100, "b": 100}'
        )

        assert result.exit_code == 1
        assert payload["error_kind"] == "arithmetic_overflow"

    def test_integer_bits_from_environment(self, runner, clean_env):
        clean_env.setenv("INTEGER_BITS", "16")

        result, payload = run_json(runner, "add-numbers", "-i", '{"a": 20000, "b": 20000}')

        assert result.exit_code == 1
        assert payload["error_kind"] == "arithmetic_overflow"

    def test_default_width_is_32_bits(self, runner):
        result, payload = run_json(runner, "add-numbers", "-i", '{"a": 20000, "b": 20000}')

        assert result.exit_code == 0
        assert payload["value"] == 40000

    def test_unknown_operation(self, runner):
        result = runner.invoke(cli, ["run", "modulo", "-i", "{}"])

        assert result.exit_code == 2
        assert "Unknown operation" in result.output

    def test_invalid_json(self, runner):
        result = runner.invoke(cli, ["run", "parse-int", "-i", "{not json"])

        assert result.exit_code == 2
        assert "Invalid JSON" in result.output

    def test_payload_must_be_object(self, runner):
        result = runner.invoke(cli, ["run", "parse-int", "-i", '["619"]'])

        assert result.exit_code == 2

    def test_payload_validation_error(self, runner):
        result = runner.invoke(cli, ["run", "divide-numbers", "-i", '{"dividend": 1}'])

        assert result.exit_code == 2
