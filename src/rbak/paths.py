"""Backup path derivation: sibling .bak/_bak names, or the same name under --dest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .models import BackupError, BackupIOError, BackupKind, InvalidSourceError, NoParentError

logger = logging.getLogger(__name__)


def backup_name(path: Path, kind: BackupKind) -> str:
    """Name of the backup for path, without any directory.

    Files get their extension replaced (report.txt -> report.bak, and
    notes -> notes.bak). Directories get _bak appended to the full name
    (project -> project_bak, v1.2 -> v1.2_bak).
    """
    if kind is BackupKind.FILE:
        # a leading dot is part of the stem, a trailing dot is an empty extension
        name = path.name
        dot = name.rfind(".")
        stem = name[:dot] if dot > 0 else name
        return f"{stem}{kind.suffix}"
    return f"{path.name}{kind.suffix}"


def _has_parent(path: Path) -> bool:
    # "/", "." and ".." have no usable name to derive a sibling from
    return path.parent != path and path.name not in ("", ".", "..")


def resolve_backup_path(
    path: Path,
    kind: BackupKind,
    dest_dir: Optional[Path] = None,
) -> Path:
    """Validate the source and return where its backup should go.

    Raises InvalidSourceError when path is missing or has the wrong type,
    NoParentError when there is nowhere to put a sibling backup, and
    BackupIOError when the source cannot be stat'ed at all.
    """
    try:
        mode = path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        raise InvalidSourceError(path, kind)
    except OSError as e:
        raise BackupIOError("reading metadata of", path, e) from e

    if not kind.matches(mode):
        raise InvalidSourceError(path, kind)
    if not _has_parent(path):
        raise NoParentError(path)

    target_dir = dest_dir if dest_dir is not None else path.parent
    bak = target_dir / backup_name(path, kind)
    logger.debug("Backup path for %s %s: %s", kind.label, path, bak)
    return bak


def derive_default(path: Path, kind: BackupKind) -> Optional[Path]:
    """Sibling backup path for path, or None if path cannot be backed up as kind."""
    try:
        return resolve_backup_path(path, kind)
    except BackupError as e:
        logger.debug("No backup path for %s: %s", path, e)
        return None


def derive_with_dest(path: Path, kind: BackupKind, dest_dir: Path) -> Path:
    """Backup path for path placed directly under dest_dir.

    dest_dir is neither created nor checked here.
    """
    return resolve_backup_path(path, kind, dest_dir)
