"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import os

import click

from ..config import DEFAULT_SETTINGS_FILE, Settings, load_settings
from ..exceptions import ConfigError


CONFIRM_WORD = "OK"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _resolve_settings(config_path: str, source: str | None, target: str | None) -> Settings:
    """Settings from explicit SOURCE/TARGET, else from the settings file.

    With explicit paths the settings file is optional; when present it
    still supplies ``ignore`` and ``log_dir``.
    """
    explicit = source is not None and target is not None
    if explicit and not os.path.exists(config_path):
        return Settings(source, target)
    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc))
    if explicit:
        return Settings(source, target, settings.ignore, settings.log_dir)
    return settings


def _confirmed() -> bool:
    """Ask for the literal confirmation word; anything else declines."""
    try:
        answer = click.prompt(
            f"Press {CONFIRM_WORD} to continue, anything else to quit",
            default="", show_default=False, prompt_suffix=":",
        )
    except click.Abort:
        # stdin closed before a line arrived
        return False
    return answer == CONFIRM_WORD


def _config_option(f):
    """Shared --config/-c option decorator."""
    return click.option(
        "--config", "-c", "config_path", type=click.Path(dir_okay=False),
        default=DEFAULT_SETTINGS_FILE, show_default=True, envvar="TREEMIRROR_CONFIG",
        help="JSON settings file with 'source' and 'target' (or set TREEMIRROR_CONFIG).",
    )(f)


def _dry_run_option(f):
    """Shared --dry-run/-n flag."""
    return click.option(
        "--dry-run", "-n", "dry_run", is_flag=True, default=False,
        help="Show what would change without touching the target.",
    )(f)


def _exclude_options(f):
    """Shared --exclude / --exclude-from options."""
    f = click.option("--exclude-from", "exclude_from", type=click.Path(exists=True, dir_okay=False),
                     help="Read exclude patterns from file.")(f)
    f = click.option("--exclude", multiple=True,
                     help="Exclude entries matching pattern (gitignore syntax, repeatable).")(f)
    return f


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, verbose):
    """treemirror: one-way directory mirroring.

    Make a target directory tree hold exactly the file and directory names
    of a source tree, copying what is missing and deleting what is extra.
    Files present on both sides are never compared or rewritten.

    \b
    Quick start:
      treemirror sync                  (paths from appsettings.json)
      treemirror sync ./photos /mnt/backup/photos
      treemirror sync -n ./src ./dst   (dry run)

    \b
    Every run appends to a daily log file named YYYYMMDD.log.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
