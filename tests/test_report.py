"""Tests for elapsed-time formatting and log setup."""

import logging
import os

import pytest

from treemirror import DailyFileHandler, LOGGER_NAME, LogSetupError, format_elapsed, setup_logging
from treemirror import report


class TestFormatElapsed:
    @pytest.mark.parametrize("seconds,expected", [
        (0, "0.00 seconds"),
        (1.234, "1.23 seconds"),
        (60, "60.00 seconds"),
        (90, "1.50 minutes"),
        (3600, "60.00 minutes"),
        (5400, "1.50 hours"),
    ])
    def test_magnitudes(self, seconds, expected):
        assert format_elapsed(seconds) == expected


class TestSetupLogging:
    def test_writes_daily_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(report, "_day_stamp", lambda: "20240102")
        log = setup_logging(str(tmp_path), console=False)
        assert log.name == LOGGER_NAME
        log.info("hello")
        text = (tmp_path / "20240102.log").read_text()
        # HH:MM:SS prefix
        assert text.endswith(" hello\n")
        assert text[2] == ":" and text[5] == ":"

    def test_appends_across_setups(self, tmp_path, monkeypatch):
        monkeypatch.setattr(report, "_day_stamp", lambda: "20240102")
        setup_logging(str(tmp_path), console=False).info("one")
        setup_logging(str(tmp_path), console=False).info("two")
        lines = (tmp_path / "20240102.log").read_text().splitlines()
        assert [line.split(" ", 1)[1] for line in lines] == ["one", "two"]

    def test_replaces_handlers(self, tmp_path):
        setup_logging(str(tmp_path))
        log = setup_logging(str(tmp_path))
        assert len(log.handlers) == 2
        assert isinstance(log.handlers[0], DailyFileHandler)
        assert log.propagate is False

    def test_console_output(self, tmp_path, capsys):
        log = setup_logging(str(tmp_path))
        log.info("to the console")
        assert capsys.readouterr().out == "to the console\n"

    def test_creates_log_dir(self, tmp_path):
        setup_logging(str(tmp_path / "logs" / "deep"), console=False)
        assert (tmp_path / "logs" / "deep").is_dir()

    def test_unopenable_log_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(LogSetupError):
            setup_logging(str(blocker), console=False)


class TestDailyFileHandler:
    def test_rolls_over_on_new_day(self, tmp_path, monkeypatch):
        days = iter(["20240101", "20240101", "20240102"])
        monkeypatch.setattr(report, "_day_stamp", lambda: next(days))
        h = DailyFileHandler(str(tmp_path))
        h.setFormatter(logging.Formatter("%(message)s"))
        try:
            for msg in ("first", "second"):
                h.emit(logging.LogRecord("t", logging.INFO, __file__, 1, msg, None, None))
        finally:
            h.close()
        assert (tmp_path / "20240101.log").read_text() == "first\n"
        assert (tmp_path / "20240102.log").read_text() == "second\n"
        assert h.baseFilename == os.path.abspath(tmp_path / "20240102.log")
