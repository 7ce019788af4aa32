"""Exceptions for treemirror."""


class TreeMirrorError(Exception):
    """Base class for errors that stop a mirror run before it starts."""


class ConfigError(TreeMirrorError):
    """Raised when the settings document is missing, unreadable or malformed."""


class LogSetupError(TreeMirrorError):
    """Raised when the daily log file cannot be opened.

    Without a log the outcome of a run is unobservable, so callers must
    stop before touching the filesystem.
    """
