"""Backing file for a sketch byte stream.

Reads the whole ``.sk`` file once and caches the bytes until the file's
modification time or size changes on disk. A file that cannot be read
raises :class:`SketchFileUnavailable`; callers treat it as fatal.

Usage example:

    f = SketchFile("drawing.sk")
    stream = f.read()
    ...
    if f.changed():
        stream = f.read()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

__all__ = ["SketchFile", "SketchFileUnavailable"]

logger = logging.getLogger(__name__)


class SketchFileUnavailable(RuntimeError):
    """The sketch file could not be opened or read."""


class SketchFile:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._data: bytes | None = None
        self._stamp: Tuple[int, int] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _stat(self) -> Tuple[int, int]:
        try:
            st = self._path.stat()
        except OSError as e:
            raise SketchFileUnavailable(f"cannot open {self._path}: {e}") from e
        return st.st_mtime_ns, st.st_size

    def changed(self) -> bool:
        """Return True if the file differs from the cached copy."""
        if self._data is None:
            return True
        try:
            return self._stat() != self._stamp
        except SketchFileUnavailable:
            logger.warning("sketch file disappeared: %s", self._path)
            return False

    def read(self) -> bytes:
        """Return the file contents, re-reading only when it has changed."""
        if self._data is not None and not self.changed():
            return self._data
        stamp = self._stat()
        try:
            data = self._path.read_bytes()
        except OSError as e:
            raise SketchFileUnavailable(f"cannot read {self._path}: {e}") from e
        self._data = data
        self._stamp = stamp
        logger.debug("loaded %s (%d bytes)", self._path, len(data))
        return data
