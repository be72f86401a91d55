"""Recursive discovery of content files under a root directory."""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterator
from pathlib import Path

from folio.shared.errors import DirectoryAccessError, FileReadError

logger = logging.getLogger(__name__)


def iter_content_files(
    root: Path, extension: str, *, recursive: bool = True
) -> Iterator[Path]:
    """Yield paths relative to ``root`` whose suffix equals ``extension``.

    Entries of each directory are visited in name order.  Symlinks are
    followed and there is no cycle guard, so a cyclic link tree never
    terminates.

    Raises:
        DirectoryAccessError: ``root`` or a sub-directory cannot be listed.
        FileReadError: an entry cannot be stat'd (e.g. a dangling symlink).
    """
    yield from _walk(root, root, extension, recursive)


def find_content_files(
    root: Path, extension: str, *, recursive: bool = True
) -> list[Path]:
    """Collect every matching file, or raise before returning anything."""
    files = list(iter_content_files(root, extension, recursive=recursive))
    logger.debug("Found %d %s file(s) under %s", len(files), extension, root)
    return files


def _walk(root: Path, current: Path, extension: str, recursive: bool) -> Iterator[Path]:
    try:
        children = sorted(current.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise DirectoryAccessError(current) from exc

    for child in children:
        try:
            mode = child.stat().st_mode
        except OSError as exc:
            raise FileReadError(child) from exc

        if stat.S_ISDIR(mode):
            if recursive:
                yield from _walk(root, child, extension, recursive)
        elif child.suffix == extension:
            yield child.relative_to(root)
