"""Recursive one-way reconciliation of a target tree against a source tree.

Each level lists both sides, diffs file names and directory names
separately, removes what only the target has, copies what only the
source has, and then descends into every source subdirectory.  Entries
are compared by name alone: a file present on both sides is left as is,
whatever its contents.
"""

from __future__ import annotations

import logging
import os
import time
from typing import TYPE_CHECKING

from ._types import LevelReport, SyncError, SyncLevel, SyncResult
from .copier import BUFFER_SIZE, copy_files
from .deleter import delete_entries
from .diff import diff_entries
from .report import LOGGER_NAME, format_elapsed
from .walker import Listing, list_directory

if TYPE_CHECKING:
    from ._exclude import IgnoreSet


def _indent(depth: int) -> str:
    if depth <= 0:
        return ""
    return "-" * (depth * 4) + " "


def format_level(report: LevelReport) -> str:
    """Render the progress line for one level."""
    return (
        f"{_indent(report.depth)}{report.name} "
        f"add: {report.files_added}, del: {report.files_deleted} files, "
        f"{report.dirs_deleted} dirs, takes {format_elapsed(report.elapsed)} ."
    )


class Reconciler:
    """Mirror a source directory onto a target directory, level by level.

    Args:
        ignore: Names and patterns left out of every listing.
        logger: Receives progress lines and per-entry failures.
        buffer_size: Working buffer capacity for file copies.
        dry_run: Report what would change without touching the target.
    """

    def __init__(
        self,
        ignore: IgnoreSet | None = None,
        *,
        logger: logging.Logger | None = None,
        buffer_size: int = BUFFER_SIZE,
        dry_run: bool = False,
    ) -> None:
        self.ignore = ignore
        self.log = logger or logging.getLogger(LOGGER_NAME)
        self.buffer_size = buffer_size
        self.dry_run = dry_run

    # ------------------------------------------------------------------
    def sync(self, source: str, target: str, depth: int = 0) -> SyncResult:
        """Reconcile *target* against *source* and recurse into subdirectories.

        A source that is missing or unreadable leaves the target alone and
        yields an empty result.
        """
        return self._sync_level(SyncLevel(source, target, depth))

    def _sync_level(self, level: SyncLevel) -> SyncResult:
        start = time.monotonic()
        result = SyncResult()

        src = list_directory(level.source, self.ignore, logger=self.log)
        if not src.ok:
            self.log.warning("skip %s: source not readable", level.source)
            return result

        dst = self._target_listing(level, result)
        if dst is None:
            return result

        files = diff_entries(src.files, dst.files)
        dirs = diff_entries(src.dirs, dst.dirs)

        report = LevelReport(
            name=os.path.basename(os.path.normpath(level.target)),
            depth=level.depth,
        )
        if self.dry_run:
            report.files_deleted = len(files.deleted)
            report.dirs_deleted = len(dirs.deleted)
            report.files_added = len(files.added)
        else:
            report.files_deleted = delete_entries(
                files.deleted, level.target, logger=self.log, errors=result.errors,
            )
            report.dirs_deleted = delete_entries(
                dirs.deleted, level.target, logger=self.log, errors=result.errors,
            )
            report.files_added = copy_files(
                files.added, level.source, level.target,
                buffer_size=self.buffer_size, logger=self.log, errors=result.errors,
            )
        report.elapsed = time.monotonic() - start
        self.log.info(format_level(report))

        result.added = report.files_added
        result.deleted = report.files_deleted
        result.dirs_deleted = report.dirs_deleted
        result.levels.append(report)

        for name in src.dir_names:
            result.merge(self._sync_level(level.child(name)))
        return result

    def _target_listing(self, level: SyncLevel, result: SyncResult) -> Listing | None:
        """List the target, creating it first when it does not exist."""
        if not os.path.isdir(level.target):
            if self.dry_run:
                return Listing()
            try:
                os.makedirs(level.target, exist_ok=True)
            except OSError as exc:
                self.log.error("mkdir %s: %s", level.target, exc)
                result.errors.append(SyncError(path=level.target, error=str(exc)))
                return None
        dst = list_directory(level.target, self.ignore, logger=self.log)
        if not dst.ok:
            self.log.error("skip %s: target not readable", level.target)
            result.errors.append(SyncError(path=level.target, error=str(dst.error)))
            return None
        return dst


def mirror(
    source: str,
    target: str,
    *,
    ignore: IgnoreSet | None = None,
    logger: logging.Logger | None = None,
    buffer_size: int = BUFFER_SIZE,
    dry_run: bool = False,
) -> SyncResult:
    """Make *target* hold the same names as *source*, recursively.

    Logs one progress line per level and a closing summary line.

    Returns:
        The aggregate :class:`SyncResult` of the whole run.
    """
    log = logger or logging.getLogger(LOGGER_NAME)
    start = time.monotonic()
    reconciler = Reconciler(
        ignore, logger=log, buffer_size=buffer_size, dry_run=dry_run,
    )
    result = reconciler.sync(source, target)
    elapsed = time.monotonic() - start
    log.info(
        "finish! total add:%d, del:%d, takes %s.",
        result.added, result.deleted, format_elapsed(elapsed),
    )
    return result
