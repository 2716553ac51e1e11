"""Shared test fixtures for rbak."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path

import pytest


def snapshot(root: Path) -> dict[str, bytes]:
    """Map each regular file under root (relative, posix) to its contents."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in root.rglob("*")
        if p.is_file() and not p.is_symlink()
    }


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for tests."""
    d = tempfile.mkdtemp(prefix="rbak-test-")
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def make_tree(tmp_dir):
    """Factory fixture to build a directory tree from {relative path: content}.

    A value of None makes an empty directory instead of a file.
    """

    def _make(name: str, files: dict[str, str | bytes | None]) -> Path:
        root = tmp_dir / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            if content is None:
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                content = content.encode()
            target.write_bytes(content)
        return root

    return _make
