"""Application-level DTOs for user-selected inputs."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable

from xsl_reader.config import SETTINGS, Settings


@dataclass(slots=True, frozen=True)
class InputSelection:
    source: str | None = None
    stylesheet: str | None = None
    archive: str | None = None

    @property
    def mode(self) -> str:
        if self.archive:
            return "archive"
        if self.source:
            return "document"
        return "empty"


def classify_inputs(names: Iterable[str], settings: Settings | None = None) -> InputSelection:
    """Sort dropped file names into source, stylesheet and archive slots."""
    settings = settings or SETTINGS
    source = stylesheet = archive = None
    for name in names:
        suffix = PurePath(name).suffix.lower()
        if suffix in settings.source_suffixes:
            source = name
        elif suffix in settings.stylesheet_suffixes:
            stylesheet = name
        elif suffix in settings.archive_suffixes:
            archive = name
    return InputSelection(source=source, stylesheet=stylesheet, archive=archive)
