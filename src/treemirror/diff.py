"""Name-level diff between a source listing and a target listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .walker import DirectoryEntry


_ADDED = 1
_UNCHANGED = 0
_DELETED = -1


@dataclass
class DiffResult:
    """Names present on only one side.

    Attributes:
        added: In source, absent from target.
        deleted: In target, absent from source.
    """
    added: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)

    @property
    def in_sync(self) -> bool:
        return not self.added and not self.deleted

    @property
    def total(self) -> int:
        return len(self.added) + len(self.deleted)


def diff_names(source: Iterable[str], target: Iterable[str]) -> DiffResult:
    """Compare two name collections.

    Every source name starts out as added; a target name either marks an
    existing entry unchanged or is inserted as deleted.  Unchanged names
    are dropped from the result.  Names are exact, case-sensitive keys.
    """
    state: dict[str, int] = {}
    for name in source:
        state[name] = _ADDED
    for name in target:
        if name in state:
            state[name] = _UNCHANGED
        else:
            state[name] = _DELETED

    result = DiffResult()
    for name, s in state.items():
        if s == _ADDED:
            result.added.append(name)
        elif s == _DELETED:
            result.deleted.append(name)
    return result


def diff_entries(
    source: Iterable[DirectoryEntry], target: Iterable[DirectoryEntry],
) -> DiffResult:
    """:func:`diff_names` over :class:`~treemirror.walker.DirectoryEntry` lists."""
    return diff_names((e.name for e in source), (e.name for e in target))
