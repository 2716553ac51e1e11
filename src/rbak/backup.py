"""Backup logic: single-file copies and recursive directory tree copies."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from .models import BackupIOError, BackupKind, BackupRequest, BackupResult
from .paths import resolve_backup_path

logger = logging.getLogger(__name__)


def copy_tree(src_dir: Path, dst_dir: Path) -> int:
    """Recursively copy the files and subdirectories of src_dir into dst_dir.

    dst_dir and any missing ancestors are created. Existing files in dst_dir
    are overwritten. Symlinks and other special entries are skipped. The
    first failure raises BackupIOError and leaves the partial copy in place.

    Returns the number of regular files copied.
    """
    try:
        dst_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BackupIOError("creating directory", dst_dir, e) from e

    try:
        with os.scandir(src_dir) as it:
            entries = list(it)
    except OSError as e:
        raise BackupIOError("reading directory", src_dir, e) from e

    copied = 0
    for entry in entries:
        src_path = Path(entry.path)
        dst_path = dst_dir / entry.name

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file(follow_symlinks=False)
        except OSError as e:
            raise BackupIOError("reading file type of", src_path, e) from e

        if is_dir:
            copied += copy_tree(src_path, dst_path)
        elif is_file:
            try:
                shutil.copyfile(src_path, dst_path)
            except OSError as e:
                raise BackupIOError("copying file", src_path, e) from e
            logger.debug("Copied %s -> %s", src_path, dst_path)
            copied += 1
        else:
            logger.debug("Skipping %s (not a regular file or directory)", src_path)

    return copied


def backup_file(source: Path, dest_dir: Optional[Path] = None) -> BackupResult:
    """Copy source to <stem>.bak beside it, or under dest_dir.

    dest_dir must already exist.
    """
    bak = resolve_backup_path(source, BackupKind.FILE, dest_dir)
    try:
        shutil.copyfile(source, bak)
    except OSError as e:
        raise BackupIOError("copying file", source, e) from e
    logger.debug("Backed up %s -> %s", source, bak)
    return BackupResult(source=source, backup=bak, kind=BackupKind.FILE, files_copied=1)


def backup_directory(source: Path, dest_dir: Optional[Path] = None) -> BackupResult:
    """Copy the tree at source to <name>_bak beside it, or under dest_dir.

    dest_dir is created if missing.
    """
    bak = resolve_backup_path(source, BackupKind.DIRECTORY, dest_dir)
    copied = copy_tree(source, bak)
    logger.debug("Backed up %d files from %s -> %s", copied, source, bak)
    return BackupResult(
        source=source, backup=bak, kind=BackupKind.DIRECTORY, files_copied=copied,
    )


def run_backup(request: BackupRequest) -> BackupResult:
    """Perform the backup described by request."""
    if request.kind is BackupKind.FILE:
        return backup_file(request.source, request.dest_dir)
    return backup_directory(request.source, request.dest_dir)
