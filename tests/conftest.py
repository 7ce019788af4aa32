"""Shared fixtures for treemirror tests."""

import logging
import os

import pytest
from click.testing import CliRunner

from treemirror import LOGGER_NAME


def build_tree(root, layout):
    """Create files and directories under *root* from a nested dict.

    String values become file contents; dict values become directories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        if isinstance(value, dict):
            build_tree(root / name, value)
        else:
            (root / name).write_text(value)
    return root


def snapshot(root):
    """Return {(relative_path, kind)} for every file and directory under *root*."""
    result = set()
    for dirpath, dirnames, filenames in os.walk(root):
        rel = os.path.relpath(dirpath, root)
        for d in dirnames:
            result.add((os.path.normpath(os.path.join(rel, d)), "directory"))
        for f in filenames:
            result.add((os.path.normpath(os.path.join(rel, f)), "file"))
    return result


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers that setup_logging attached during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def log():
    return logging.getLogger(LOGGER_NAME + ".test")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source(tmp_path):
    """A source tree with files at two levels.

    Tree:
        a.txt, b.txt,
        sub/x.txt, sub/deep/y.txt
    """
    return build_tree(tmp_path / "source", {
        "a.txt": "alpha",
        "b.txt": "beta",
        "sub": {
            "x.txt": "ex",
            "deep": {"y.txt": "why"},
        },
    })


@pytest.fixture
def target(tmp_path):
    """A target tree that overlaps *source* only partly."""
    return build_tree(tmp_path / "target", {
        "b.txt": "old beta",
        "c.txt": "gamma",
        "stale": {"z.txt": "zed", "inner": {"w.txt": "w"}},
    })
