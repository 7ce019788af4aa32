"""Buffered file copies from a source directory into a target directory."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from ._types import SyncError

BUFFER_SIZE = 20 * 1024 * 1024  # 20 MiB


class _ReadError(OSError):
    pass


def _record(errors, path, exc):
    if errors is not None:
        errors.append(SyncError(path=path, error=str(exc)))


def _discard_partial(path: str, log: logging.Logger) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        log.warning("copy_files cannot remove partial %s: %s", path, exc)


def _transfer(src, dst, buf: bytearray) -> None:
    """Pump *src* into *dst* through *buf* until end of input."""
    view = memoryview(buf)
    while True:
        try:
            n = src.readinto(buf)
        except OSError as exc:
            raise _ReadError(*exc.args) from exc
        if not n:
            return
        dst.write(view[:n])


def copy_files(
    names: Iterable[str],
    source: str,
    target: str,
    *,
    buffer_size: int = BUFFER_SIZE,
    logger: logging.Logger | None = None,
    errors: list[SyncError] | None = None,
) -> int:
    """Copy each file in *names* from *source* dir into *target* dir.

    Destinations are created or truncated.  One working buffer of
    *buffer_size* bytes serves the whole batch.  Timestamps, permissions
    and ownership are not carried over.

    A file that cannot be opened, created, read or written is logged,
    appended to *errors* and skipped; a half-written destination is
    removed.  The rest of the batch still runs.

    Returns:
        Number of files copied completely.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    log = logger or logging.getLogger(__name__)
    buf = bytearray(buffer_size)
    copied = 0

    for name in names:
        src_path = os.path.join(source, name)
        dst_path = os.path.join(target, name)
        try:
            src = open(src_path, "rb")
        except OSError as exc:
            log.error("copy_files open %s: %s", src_path, exc)
            _record(errors, src_path, exc)
            continue
        with src:
            try:
                dst = open(dst_path, "wb")
            except OSError as exc:
                log.error("copy_files create %s: %s", dst_path, exc)
                _record(errors, dst_path, exc)
                continue
            try:
                with dst:
                    _transfer(src, dst, buf)
            except _ReadError as exc:
                log.error("copy_files read %s: %s", src_path, exc)
                _record(errors, src_path, exc)
                _discard_partial(dst_path, log)
                continue
            except OSError as exc:
                log.error("copy_files write %s: %s", dst_path, exc)
                _record(errors, dst_path, exc)
                _discard_partial(dst_path, log)
                continue
        copied += 1
    return copied
