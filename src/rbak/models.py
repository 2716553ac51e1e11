"""Data models and errors for rbak."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class BackupKind(Enum):
    """What a backup target is expected to be on disk."""

    FILE = "file"
    DIRECTORY = "dir"

    @property
    def suffix(self) -> str:
        return ".bak" if self is BackupKind.FILE else "_bak"

    @property
    def label(self) -> str:
        return "file" if self is BackupKind.FILE else "directory"

    def matches(self, mode: int) -> bool:
        """True if a stat mode has the filesystem type of this kind."""
        if self is BackupKind.FILE:
            return stat.S_ISREG(mode)
        return stat.S_ISDIR(mode)


@dataclass
class BackupRequest:
    """One backup invocation, as gathered from the command line."""

    source: Path
    kind: BackupKind
    dest_dir: Optional[Path] = None


@dataclass
class BackupResult:
    """Outcome of a completed backup."""

    source: Path
    backup: Path
    kind: BackupKind
    files_copied: int = 0


class BackupError(Exception):
    """Base class for every failure rbak reports."""


class InvalidSourceError(BackupError):
    """Source is missing, or is not the kind of entry that was asked for."""

    def __init__(self, path: Path, kind: BackupKind):
        self.path = path
        self.kind = kind
        super().__init__(f"{path} is not a valid {kind.label}")


class NoParentError(BackupError):
    """Source has no parent directory to hold a sibling backup."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} has no parent directory to back up into")


class BackupIOError(BackupError):
    """A filesystem operation failed while preparing or copying a backup."""

    def __init__(self, operation: str, path: Path, cause: OSError):
        self.operation = operation
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{operation} {path}: {reason}")
