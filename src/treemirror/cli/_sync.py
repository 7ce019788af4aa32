"""The sync command."""

from __future__ import annotations

import click

from .._exclude import DEFAULT_IGNORED, IgnoreSet
from ..copier import BUFFER_SIZE
from ..exceptions import LogSetupError
from ..reconcile import mirror
from ..report import setup_logging
from ._helpers import (
    main,
    _config_option,
    _confirmed,
    _dry_run_option,
    _exclude_options,
    _resolve_settings,
    _status,
)


@main.command()
@click.argument("paths", nargs=-1)
@_config_option
@_dry_run_option
@_exclude_options
@click.option("--log-dir", "log_dir", type=click.Path(), default=None,
              help="Directory for daily log files (default: settings 'log_dir' or '.').")
@click.option("--buffer-size", "buffer_size", type=click.IntRange(min=1), default=BUFFER_SIZE,
              show_default=True, help="Copy buffer size in bytes.")
@click.pass_context
def sync(ctx, paths, config_path, dry_run, exclude, exclude_from, log_dir, buffer_size):
    """Make TARGET hold the same names as SOURCE (like rsync --delete).

    \b
    With no arguments, paths come from the settings file:
        treemirror sync -c appsettings.json
    With two arguments, they override the settings file:
        treemirror sync ./source ./target

    Asks for confirmation: type OK to proceed; anything else quits
    without changes.
    """
    if len(paths) not in (0, 2):
        raise click.ClickException("sync takes no arguments or SOURCE TARGET")
    source, target = paths if paths else (None, None)

    settings = _resolve_settings(config_path, source, target)

    try:
        log = setup_logging(log_dir or settings.log_dir or ".")
    except LogSetupError as exc:
        raise click.ClickException(str(exc))

    log.info("Application start")
    log.info("Source: %s", settings.source)
    log.info("Target: %s", settings.target)

    if not _confirmed():
        _status(ctx, "Aborted")
        return

    ignore = IgnoreSet(
        DEFAULT_IGNORED,
        patterns=list(settings.ignore) + list(exclude),
        exclude_from=exclude_from,
    )
    result = mirror(
        settings.source, settings.target,
        ignore=ignore, logger=log, buffer_size=buffer_size, dry_run=dry_run,
    )
    if ctx.obj.get("verbose"):
        for e in result.errors:
            click.echo(f"ERROR: {e.path}: {e.error}", err=True)
    _status(ctx, f"Synced -> {settings.target}")
