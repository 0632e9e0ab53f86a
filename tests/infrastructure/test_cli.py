"""CLI tests through click's test runner."""

import errno
import logging

import pytest
from click.testing import CliRunner

from roster.infrastructure.cli.main import cli


@pytest.fixture(autouse=True)
def detach_log_handlers():
    yield
    logger = logging.getLogger("roster")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestAddressCommand:

    def test_valid_address(self, runner):
        result = runner.invoke(
            cli,
            ["address", "create", "--street", "Main St", "--city", "Athens",
             "--postal-code", "19840"],
        )

        assert result.exit_code == 0
        assert "Street: Main St, City: Athens, Postal Code: 19840" in result.output

    def test_invalid_address_reports_message(self, runner):
        result = runner.invoke(
            cli,
            ["address", "create", "--street", "Main St", "--city", "Athens",
             "--postal-code", "0"],
        )

        assert result.exit_code == 1
        assert "The postal code must be between 1 and 99950." in result.output

    def test_strict_failure_exits_with_invalid_argument(self, runner):
        result = runner.invoke(
            cli,
            ["address", "create", "--street", "", "--city", "Athens", "--strict"],
        )

        assert result.exit_code == errno.EINVAL
        assert "Critical Creation Failure" in result.output


class TestPersonCommand:

    def test_valid_person(self, runner):
        result = runner.invoke(
            cli,
            ["person", "create", "--name", "John", "--age", "30",
             "--street", "Main St", "--city", "Athens", "--postal-code", "19840"],
        )

        assert result.exit_code == 0
        assert "Name: John, Age: 30" in result.output

    def test_invalid_age(self, runner):
        result = runner.invoke(
            cli,
            ["person", "create", "--name", "John", "--age", "0",
             "--street", "Main St", "--city", "Athens"],
        )

        assert result.exit_code == 1
        assert "Age must be between 1 and 120." in result.output

    def test_strict_failure_with_debug(self, runner):
        result = runner.invoke(
            cli,
            ["--debug", "person", "create", "--name", "", "--age", "30",
             "--street", "Main St", "--city", "Athens", "--strict"],
        )

        assert result.exit_code == errno.EINVAL


class TestConfiguration:

    def test_invalid_configuration_is_reported(self, runner, monkeypatch):
        from roster.config import get_settings

        monkeypatch.setenv("ROSTER_DEVELOPER_MODE", "maybe")
        get_settings.cache_clear()

        result = runner.invoke(cli, ["errors"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestErrorsCommand:

    def test_lists_every_error(self, runner):
        result = runner.invoke(cli, ["errors"])

        assert result.exit_code == 0
        for tag in ("EMPTY_STREET", "EMPTY_CITY", "INVALID_POSTAL_CODE",
                    "EMPTY_NAME", "INVALID_AGE"):
            assert tag in result.output
