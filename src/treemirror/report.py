"""Progress reporting: elapsed-time text and the daily log file."""

from __future__ import annotations

import logging
import os
import sys
import time

from .exceptions import LogSetupError

LOGGER_NAME = "treemirror"

_FILE_FORMAT = "%(asctime)s %(message)s"
_FILE_DATEFMT = "%H:%M:%S"


def format_elapsed(seconds: float) -> str:
    """Render a duration in hours, minutes or seconds by magnitude."""
    if seconds > 3600:
        return f"{seconds / 3600:.2f} hours"
    if seconds > 60:
        return f"{seconds / 60:.2f} minutes"
    return f"{seconds:.2f} seconds"


def _day_stamp() -> str:
    return time.strftime("%Y%m%d")


class DailyFileHandler(logging.FileHandler):
    """Append records to ``<log_dir>/YYYYMMDD.log``.

    The file for the current calendar day is opened eagerly so that an
    unwritable log directory is detected before any work starts; when the
    day changes mid-run the handler moves on to the new day's file.
    """

    def __init__(self, log_dir: str = ".", encoding: str = "utf-8") -> None:
        self.log_dir = log_dir
        self._day = _day_stamp()
        super().__init__(self._path_for(self._day), mode="a", encoding=encoding)

    def _path_for(self, day: str) -> str:
        return os.path.join(self.log_dir, f"{day}.log")

    def emit(self, record: logging.LogRecord) -> None:
        day = _day_stamp()
        if day != self._day:
            self.acquire()
            try:
                self._day = day
                self.baseFilename = os.path.abspath(self._path_for(day))
                if self.stream is not None:
                    self.stream.close()
                    self.stream = None
            finally:
                self.release()
        super().emit(record)


def setup_logging(
    log_dir: str = ".",
    *,
    console: bool = True,
    level: int = logging.INFO,
) -> logging.Logger:
    """Configure the ``treemirror`` logger with a daily file and stdout.

    Handlers installed by an earlier call are replaced.

    Raises:
        LogSetupError: If the log file cannot be opened.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    try:
        os.makedirs(log_dir, exist_ok=True)
        fh = DailyFileHandler(log_dir)
    except OSError as exc:
        raise LogSetupError(f"cannot open log file in {log_dir}: {exc}") from exc
    fh.setFormatter(logging.Formatter(fmt=_FILE_FORMAT, datefmt=_FILE_DATEFMT))
    logger.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(ch)
    return logger
