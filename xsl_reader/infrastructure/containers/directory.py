"""Filesystem-backed container for plain directories."""
from __future__ import annotations

import logging
from pathlib import Path

from xsl_reader.domain.repositories import EntryNotFoundError, EntryReadError

logger = logging.getLogger(__name__)


class PlainDirectoryContainer:
    """Treats filesystem paths as entry names.

    Relative names are taken relative to ``root`` when one is given, otherwise
    relative to the working directory. Stylesheets are looked up as siblings of
    the source file only.
    """

    def __init__(self, root: Path | str | None = None) -> None:
        self._root = Path(root) if root is not None else None

    def _path(self, name: str) -> Path:
        path = Path(name)
        if self._root is not None and not path.is_absolute():
            return self._root / path
        return path

    def open(self, name: str) -> bytes:
        if not name:
            raise EntryNotFoundError(name)
        path = self._path(name)
        try:
            if path.is_dir():
                raise EntryNotFoundError(name)
            return path.read_bytes()
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise EntryNotFoundError(name) from exc
        except OSError as exc:
            raise EntryReadError(f"{name}: {exc.strerror or exc}") from exc

    def locate(self, source_name: str, reference: str) -> str | None:
        candidate = Path(source_name).parent / reference
        try:
            found = self._path(str(candidate)).exists()
        except OSError:
            # Unsearchable parent; let open report the read failure.
            return str(candidate)
        if found:
            return str(candidate)
        logger.debug("No sibling stylesheet at %s", candidate)
        return None
