"""Data structures for mirror runs."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class SyncError:
    """An entry that failed during a copy or delete.

    Attributes:
        path: The path that caused the error.
        error: Human-readable error message.
    """
    path: str
    error: str


@dataclass(frozen=True)
class SyncLevel:
    """Recursion context for one directory level.

    *depth* only controls the indentation of the progress line.
    """
    source: str
    target: str
    depth: int = 0

    def child(self, name: str) -> SyncLevel:
        return SyncLevel(
            os.path.join(self.source, name),
            os.path.join(self.target, name),
            self.depth + 1,
        )


@dataclass
class LevelReport:
    """What one level did, excluding its subdirectories.

    Attributes:
        name: Base name of the target directory.
        depth: Recursion depth (0 for the root).
        files_added: Files copied (or that would be, in a dry run).
        files_deleted: Files removed.
        dirs_deleted: Directories removed with their subtree.
        elapsed: Wall time of this level's own work, in seconds.
    """
    name: str
    depth: int
    files_added: int = 0
    files_deleted: int = 0
    dirs_deleted: int = 0
    elapsed: float = 0.0


@dataclass
class SyncResult:
    """Aggregate result of a level and everything beneath it.

    Attributes:
        added: Files added, summed over all levels.
        deleted: Files deleted, summed over all levels.
        dirs_deleted: Directories deleted, summed over all levels.
        levels: One :class:`LevelReport` per visited level, in visit order.
        errors: Per-entry failures.
    """
    added: int = 0
    deleted: int = 0
    dirs_deleted: int = 0
    levels: list[LevelReport] = field(default_factory=list)
    errors: list[SyncError] = field(default_factory=list)

    @property
    def in_sync(self) -> bool:
        return not self.added and not self.deleted and not self.dirs_deleted

    def merge(self, child: SyncResult) -> None:
        """Fold a subdirectory's result into this one."""
        self.added += child.added
        self.deleted += child.deleted
        self.dirs_deleted += child.dirs_deleted
        self.levels.extend(child.levels)
        self.errors.extend(child.errors)
