from ._exclude import IgnoreSet, DEFAULT_IGNORED
from ._types import SyncError, SyncLevel, LevelReport, SyncResult
from .walker import EntryKind, DirectoryEntry, Listing, list_directory
from .diff import DiffResult, diff_names, diff_entries
from .copier import BUFFER_SIZE, copy_files
from .deleter import delete_entries
from .reconcile import Reconciler, mirror, format_level
from .report import format_elapsed, setup_logging, DailyFileHandler, LOGGER_NAME
from .config import Settings, load_settings, DEFAULT_SETTINGS_FILE
from .exceptions import TreeMirrorError, ConfigError, LogSetupError

__all__ = [
    "IgnoreSet", "DEFAULT_IGNORED",
    "SyncError", "SyncLevel", "LevelReport", "SyncResult",
    "EntryKind", "DirectoryEntry", "Listing", "list_directory",
    "DiffResult", "diff_names", "diff_entries",
    "BUFFER_SIZE", "copy_files", "delete_entries",
    "Reconciler", "mirror", "format_level",
    "format_elapsed", "setup_logging", "DailyFileHandler", "LOGGER_NAME",
    "Settings", "load_settings", "DEFAULT_SETTINGS_FILE",
    "TreeMirrorError", "ConfigError", "LogSetupError",
]
