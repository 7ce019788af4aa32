"""Directory listing: the immediate files and subdirectories of one level."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._exclude import IgnoreSet


class EntryKind(str, Enum):
    """Kind of a listed entry: ``FILE`` or ``DIRECTORY``."""
    FILE = "file"
    DIRECTORY = "directory"

    def __str__(self) -> str:          # noqa: D105
        return self.value


@dataclass(frozen=True)
class DirectoryEntry:
    """A named child of a directory.

    Identity is the name alone; no size, timestamp or content hash is kept.
    """
    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class Listing:
    """Regular files and subdirectories of one directory.

    Attributes:
        files: Regular-file entries.
        dirs: Directory entries.
        error: The error that prevented listing, or ``None``.
    """
    files: list[DirectoryEntry] = field(default_factory=list)
    dirs: list[DirectoryEntry] = field(default_factory=list)
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def file_names(self) -> list[str]:
        return [e.name for e in self.files]

    @property
    def dir_names(self) -> list[str]:
        return [e.name for e in self.dirs]


def list_directory(
    path: str,
    ignore: IgnoreSet | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Listing:
    """List the immediate children of *path*, split into files and dirs.

    Entries are classified by their own type (symlinks are not followed);
    symlinks, devices, sockets and FIFOs appear in neither list.  Names
    rejected by *ignore* are dropped.

    A missing or unreadable *path* yields an empty :class:`Listing` whose
    ``error`` is set.  The condition is logged, never raised.
    """
    log = logger or logging.getLogger(__name__)
    listing = Listing()
    try:
        with os.scandir(path) as it:
            for entry in it:
                if entry.is_dir(follow_symlinks=False):
                    kind = EntryKind.DIRECTORY
                elif entry.is_file(follow_symlinks=False):
                    kind = EntryKind.FILE
                else:
                    continue
                if ignore is not None and ignore.is_ignored(
                    entry.name, is_dir=kind is EntryKind.DIRECTORY,
                ):
                    continue
                if kind is EntryKind.DIRECTORY:
                    listing.dirs.append(DirectoryEntry(entry.name, kind))
                else:
                    listing.files.append(DirectoryEntry(entry.name, kind))
    except OSError as exc:
        log.warning("list_directory %s: %s", path, exc)
        return Listing(error=exc)
    return listing
