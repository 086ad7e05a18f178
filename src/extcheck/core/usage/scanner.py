"""Source file discovery for the permission usage scan.

``SourceScanner`` walks a project tree depth-first and lazily yields the
absolute paths of files whose extension is recognized. Dependency caches,
build output, and VCS metadata are never entered. Symbolic links are
neither followed nor yielded, so link cycles cannot occur.

A directory that cannot be listed aborts the whole scan with
``ScanError``; there is no partial-tree result.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator

from extcheck.exceptions import ScanError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: frozenset[str] = frozenset({".ts", ".js", ".tsx", ".jsx"})

EXCLUDED_DIRS: frozenset[str] = frozenset({"node_modules", "dist", ".git"})


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


class SourceScanner:
    """Depth-first walker yielding candidate source files.

    Entries within a directory are visited in name order so repeated scans
    of an unchanged tree yield the same sequence.

    Usage::

        scanner = SourceScanner()
        for path in scanner.iter_files(Path("my-extension")):
            ...
    """

    def __init__(
        self,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        excluded_dirs: Iterable[str] = EXCLUDED_DIRS,
    ) -> None:
        self._extensions = frozenset(_normalize_extension(e) for e in extensions)
        self._excluded_dirs = frozenset(excluded_dirs)

    @property
    def extensions(self) -> frozenset[str]:
        return self._extensions

    @property
    def excluded_dirs(self) -> frozenset[str]:
        return self._excluded_dirs

    def iter_files(self, root: Path | str) -> Iterator[Path]:
        """Yield absolute paths of recognized source files under ``root``.

        Raises:
            ScanError: If ``root`` or any directory below it cannot be read.
        """
        yield from self._walk(Path(root).absolute())

    def _walk(self, directory: Path) -> Iterator[Path]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            raise ScanError(f"Cannot read directory {directory}: {exc}") from exc

        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                if entry.name in self._excluded_dirs:
                    logger.debug("Skipping excluded directory %s", entry.path)
                    continue
                yield from self._walk(Path(entry.path))
            elif entry.is_file(follow_symlinks=False):
                if os.path.splitext(entry.name)[1].lower() in self._extensions:
                    yield Path(entry.path)
