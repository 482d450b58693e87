"""ZIP-backed container."""
from __future__ import annotations

import logging
import zipfile
import zlib
from io import BytesIO
from pathlib import Path
from typing import Sequence

from xsl_reader.config import SETTINGS, Settings
from xsl_reader.domain.models import ContainerEntry
from xsl_reader.domain.repositories import ContainerOpenError, EntryNotFoundError, EntryReadError
from xsl_reader.domain.services import match_stylesheet_entry

logger = logging.getLogger(__name__)

_OPEN_ERRORS = (zipfile.BadZipFile, zlib.error, NotImplementedError, ValueError, EOFError, OSError)
_READ_ERRORS = (*_OPEN_ERRORS, RuntimeError)


def _has_suffix(name: str, suffixes: Sequence[str]) -> bool:
    lowered = name.lower()
    return any(lowered.endswith(suffix.lower()) for suffix in suffixes)


class ArchiveContainer:
    """Read-only view over a ZIP archive.

    Owns the underlying ``ZipFile`` exclusively; use it as a context manager so
    the handle is released on every exit path.
    """

    def __init__(
        self,
        archive: zipfile.ZipFile,
        path: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._archive = archive
        self._path = path
        self._settings = settings or SETTINGS

    @classmethod
    def from_path(cls, path: Path | str, settings: Settings | None = None) -> "ArchiveContainer":
        try:
            archive = zipfile.ZipFile(path)
        except _OPEN_ERRORS as exc:
            raise ContainerOpenError(f"Failed to open ZIP file {path}: {exc}") from exc
        logger.debug("Opened archive %s", path)
        return cls(archive, path=str(path), settings=settings)

    @classmethod
    def from_bytes(cls, data: bytes, settings: Settings | None = None) -> "ArchiveContainer":
        try:
            archive = zipfile.ZipFile(BytesIO(data))
        except _OPEN_ERRORS as exc:
            raise ContainerOpenError(f"Failed to open ZIP data: {exc}") from exc
        return cls(archive, settings=settings)

    @property
    def path(self) -> str | None:
        return self._path

    def close(self) -> None:
        self._archive.close()

    def __enter__(self) -> "ArchiveContainer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def entries(self) -> Sequence[ContainerEntry]:
        return [
            ContainerEntry(name=info.filename, is_directory=info.is_dir(), size=info.file_size)
            for info in self._archive.infolist()
        ]

    def list(self) -> Sequence[ContainerEntry]:
        return [
            entry
            for entry in self.entries()
            if not entry.is_directory and _has_suffix(entry.name, self._settings.source_suffixes)
        ]

    def open(self, name: str) -> bytes:
        info = self._find(name)
        if info is None:
            raise EntryNotFoundError(name)
        try:
            with self._archive.open(info) as stream:
                return stream.read()
        except _READ_ERRORS as exc:
            raise EntryReadError(f"{name}: {exc}") from exc

    def locate(self, source_name: str, reference: str) -> str | None:
        return match_stylesheet_entry(self.entries(), source_name, reference)

    def _find(self, name: str) -> zipfile.ZipInfo | None:
        for info in self._archive.infolist():
            if info.filename == name and not info.is_dir():
                return info
        return None
