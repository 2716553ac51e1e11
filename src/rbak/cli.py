"""CLI entry point: file + dir subcommands."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click

from .backup import run_backup
from .models import (
    BackupError,
    BackupKind,
    BackupRequest,
    BackupResult,
    InvalidSourceError,
)

logger = logging.getLogger(__name__)

_SEPARATORS = tuple(s for s in (os.sep, os.altsep) if s)


def _setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _run(kind: BackupKind, path: str, dest: Optional[str]) -> BackupResult:
    request = BackupRequest(
        source=Path(path),
        kind=kind,
        dest_dir=Path(dest) if dest else None,
    )
    logger.info("Backing up %s %s", kind.label, request.source)
    try:
        # Path() drops a trailing separator, which the OS would reject for a file
        if kind is BackupKind.FILE and path.endswith(_SEPARATORS):
            raise InvalidSourceError(request.source, kind)
        return run_backup(request)
    except BackupError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(package_name="rbak")
def main():
    """rbak: back up a file (name.bak) or a directory tree (name_bak)."""
    pass


@main.command()
@click.argument("path", type=click.Path())
@click.option("--dest", type=click.Path(file_okay=False), default=None,
              help="Existing directory to place the .bak file in")
@click.option("--verbose", "-v", is_flag=True,
              help="Enable debug logging")
def file_cmd(path, dest, verbose):
    """Back up a single file (creates file.bak)."""
    _setup_logging(verbose)
    result = _run(BackupKind.FILE, path, dest)
    click.echo(f"Created: {result.backup}")


@main.command()
@click.argument("path", type=click.Path())
@click.option("--dest", type=click.Path(file_okay=False), default=None,
              help="Directory to place the _bak copy in (created if missing)")
@click.option("--verbose", "-v", is_flag=True,
              help="Enable debug logging")
def dir_cmd(path, dest, verbose):
    """Back up a directory recursively (creates dir_bak)."""
    _setup_logging(verbose)
    result = _run(BackupKind.DIRECTORY, path, dest)
    click.echo(f"Created: {result.backup}")
    click.echo(f"Files copied: {result.files_copied}")


# Register subcommands
main.add_command(file_cmd, "file")
main.add_command(dir_cmd, "dir")
