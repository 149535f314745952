"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from hoppath.config.logging import configure_logging
from hoppath.services.path import PathService
from tests.conftest import DIAMOND, build_network


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("hoppath").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("hoppath").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("hoppath.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "hoppath.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("hoppath.infrastructure.edges_file").debug("Skipping row %d", 3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Skipping row 3"
        assert parsed["level"] == "debug"

    def test_debug_suppressed_when_quiet(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("hoppath.x").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1


class TestStageTagging:
    def test_load_records_tagged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("hoppath.infrastructure.edges_file").debug("Skipping row %d", 3)
        assert json.loads(capfd.readouterr().err.strip())["stage"] == "load"

    def test_untracked_logger_has_no_stage(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("hoppath.output").warning("plain")
        assert "stage" not in json.loads(capfd.readouterr().err.strip())

    def test_path_query_event(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        PathService(build_network(DIAMOND)).shortest_path(1, 3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "path.query"
        assert parsed["stage"] == "query"
        assert parsed["hops"] == 2
        assert parsed["visited"] == 4

    def test_failed_query_logs_outcome(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        PathService(build_network(DIAMOND)).shortest_path(1, 99)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["outcome"] == "VERTEX_NOT_FOUND"
