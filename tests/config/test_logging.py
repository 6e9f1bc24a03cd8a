"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from ubicity.config.logging import configure_logging, resolve_level


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ubi = logging.getLogger("ubicity")
    ubi_level = ubi.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ubi.setLevel(ubi_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("ubicity").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("ubicity").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("ubicity.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "ubicity.test"
        assert "timestamp" in parsed

    def test_stdlib_decode_failure_logged_when_verbose(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        from ubicity.domain.validation import ExperienceValidator

        configure_logging(verbose=True, log_json=True)
        ExperienceValidator().validate("{")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "ubicity.domain.validation"
        assert parsed["event"].startswith("Experience decode failed")

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("ubicity.services.analysis").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_quiet_raises_threshold(self) -> None:
        configure_logging(quiet=True)
        assert logging.getLogger("ubicity").level == logging.ERROR

    def test_verbose_beats_quiet(self) -> None:
        configure_logging(verbose=True, quiet=True)
        assert logging.getLogger("ubicity").level == logging.DEBUG

    def test_bound_command_in_json_logs(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        structlog.contextvars.bind_contextvars(command="network")
        try:
            logging.getLogger("ubicity.services.analysis").warning("heads up")
        finally:
            structlog.contextvars.clear_contextvars()
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["command"] == "network"
        assert parsed["event"] == "heads up"


class TestResolveLevel:
    @pytest.mark.parametrize(
        ("verbose", "quiet", "level"),
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.DEBUG),
        ],
    )
    def test_levels(self, verbose: bool, quiet: bool, level: int) -> None:
        assert resolve_level(verbose=verbose, quiet=quiet) == level
