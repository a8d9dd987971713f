"""Tests for the click ``start`` command and the ``eliza`` group."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from eliza_cli.cli import main
from eliza_cli.commands.start import StartOptions
from eliza_cli.constants import ELIZA_VERSION


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("eliza_cli.commands.start.setup_basic_logging") as setup_logging:
        yield setup_logging


class TestStartCommand:
    """Tests for option parsing and exit codes."""

    def test_help_lists_options(self, runner):
        result = runner.invoke(main, ["start", "--help"])

        assert result.exit_code == 0
        for option in ("--port", "--configure", "--dev", "--character"):
            assert option in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert ELIZA_VERSION in result.output

    def test_options_are_forwarded(self, runner):
        with patch("eliza_cli.commands.start._run", new_callable=AsyncMock) as run:
            result = runner.invoke(main, ["start", "-p", "4000", "-c"])

        assert result.exit_code == 0
        run.assert_awaited_once_with(StartOptions(port=4000, configure=True, dev=False, character=None))

    def test_dev_mode_enables_debug_logging(self, runner, no_logging_setup):
        with patch("eliza_cli.commands.start._run", new_callable=AsyncMock):
            result = runner.invoke(main, ["start", "--dev"])

        assert result.exit_code == 0
        assert no_logging_setup.call_args.kwargs["level"] == 10
        assert no_logging_setup.call_args.kwargs["log_to_file"] is True

    def test_character_is_loaded_before_bootstrap(self, runner):
        with runner.isolated_filesystem():
            with open("hero.json", "w") as f:
                json.dump({"name": "Hero"}, f)

            with patch("eliza_cli.commands.start._run", new_callable=AsyncMock) as run:
                result = runner.invoke(main, ["start", "--character", "hero.json"])

        assert result.exit_code == 0
        options = run.await_args.args[0]
        assert options.character.name == "Hero"

    def test_character_load_failure_exits_1(self, runner):
        with runner.isolated_filesystem():
            with patch("eliza_cli.commands.start._run", new_callable=AsyncMock) as run:
                result = runner.invoke(main, ["start", "--character", "missing.json"])

        assert result.exit_code == 1
        run.assert_not_awaited()

    def test_non_utf8_character_file_exits_1(self, runner):
        with runner.isolated_filesystem():
            with open("garbled.json", "wb") as f:
                f.write(b'{"name": "\xff"}')

            with patch("eliza_cli.commands.start._run", new_callable=AsyncMock) as run:
                result = runner.invoke(main, ["start", "--character", "garbled.json"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        run.assert_not_awaited()

    def test_unexpected_error_exits_1(self, runner):
        with patch("eliza_cli.commands.start._run", new_callable=AsyncMock, side_effect=RuntimeError("boom")):
            result = runner.invoke(main, ["start"])

        assert result.exit_code == 1

    def test_keyboard_interrupt_exits_cleanly(self, runner):
        with patch("eliza_cli.commands.start._run", new_callable=AsyncMock, side_effect=KeyboardInterrupt):
            result = runner.invoke(main, ["start"])

        assert result.exit_code == 0
