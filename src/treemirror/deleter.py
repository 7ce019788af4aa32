"""Recursive removal of target entries."""

from __future__ import annotations

import logging
import os
import shutil
from typing import Iterable

from ._types import SyncError


def delete_entries(
    names: Iterable[str],
    target: str,
    *,
    logger: logging.Logger | None = None,
    errors: list[SyncError] | None = None,
) -> int:
    """Remove each entry in *names* from the *target* directory.

    Directories go with their entire subtree; anything else is unlinked.
    A name that has already disappeared counts as removed.  Failures are
    logged, appended to *errors*, and do not stop the remaining names.

    Returns:
        Number of entries removed.
    """
    log = logger or logging.getLogger(__name__)
    removed = 0
    for name in names:
        path = os.path.join(target, name)
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.unlink(path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            log.error("delete_entries %s: %s", path, exc)
            if errors is not None:
                errors.append(SyncError(path=path, error=str(exc)))
            continue
        removed += 1
    return removed
