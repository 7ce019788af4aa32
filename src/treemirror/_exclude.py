"""Ignore-set support for directory listings.

Combines a fixed set of ignored names (filesystem metadata such as
``.DS_Store``), ``--exclude`` patterns and ``--exclude-from`` files into a
single predicate used by :func:`~treemirror.walker.list_directory`.

Pattern syntax follows gitignore rules (implemented by
``dulwich.ignore.IgnoreFilter``).  Patterns are matched against the entry
name only, since every listing covers one directory level.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from dulwich.ignore import IgnoreFilter

DEFAULT_IGNORED = frozenset({".DS_Store"})


class IgnoreSet:
    """Fixed names plus --exclude patterns and --exclude-from files."""

    def __init__(
        self,
        names: Iterable[str] = DEFAULT_IGNORED,
        *,
        patterns: Sequence[str] | None = None,
        exclude_from: str | None = None,
    ) -> None:
        self._names = frozenset(names)
        lines: list[bytes] = []
        for p in patterns or ():
            lines.append(p.encode("utf-8"))
        if exclude_from is not None:
            path = Path(exclude_from)
            for raw in path.read_bytes().splitlines():
                line = raw.strip()
                if line and not line.startswith(b"#"):
                    lines.append(line)
        self._filter: IgnoreFilter | None = IgnoreFilter(lines) if lines else None

    # ------------------------------------------------------------------
    @property
    def names(self) -> frozenset[str]:
        return self._names

    @property
    def active(self) -> bool:
        """True if any filtering is configured."""
        return bool(self._names) or self._filter is not None

    # ------------------------------------------------------------------
    def is_ignored(self, name: str, *, is_dir: bool = False) -> bool:
        """Return True if the entry *name* must be left out of a listing."""
        if name in self._names:
            return True
        if self._filter is None:
            return False
        check = name + "/" if is_dir else name
        return self._filter.is_ignored(check) is True

    def __repr__(self) -> str:
        return f"IgnoreSet(names={sorted(self._names)!r}, patterns={self._filter is not None})"
