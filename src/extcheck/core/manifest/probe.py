"""Filesystem existence checks for paths declared in a manifest."""

from __future__ import annotations

from pathlib import Path


class FileProbe:
    """Resolves manifest-relative paths against a base directory.

    Paths declared in a manifest (icons, service worker, content scripts)
    are relative to the directory holding ``manifest.json``. A probe is
    read-only and holds no state besides its base directory.

    Usage::

        probe = FileProbe(Path("my-extension"))
        probe.exists("icons/icon16.png")
    """

    def __init__(self, base_dir: Path | str) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        """The directory declared paths are resolved against."""
        return self._base_dir

    def resolve(self, relative_path: str) -> Path:
        """Return the path a declared entry refers to."""
        return self._base_dir / relative_path.lstrip("/")

    def exists(self, relative_path: str) -> bool:
        """Check whether a declared path exists (file or directory)."""
        return self.resolve(relative_path).exists()
