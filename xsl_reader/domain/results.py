"""Domain-level results returned across the resolver boundary."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from .models import ErrorKind, ResolutionError


@dataclass(frozen=True)
class DocumentPair:
    source_content: str | None = None
    source_name: str | None = None
    stylesheet_content: str | None = None
    stylesheet_name: str | None = None
    error: ResolutionError | None = None

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "DocumentPair":
        return cls(error=ResolutionError(kind, message))

    def with_stylesheet(self, name: str, content: str) -> "DocumentPair":
        return replace(self, stylesheet_name=name, stylesheet_content=content)

    def with_error(self, kind: ErrorKind, message: str) -> "DocumentPair":
        return replace(self, error=ResolutionError(kind, message))

    @property
    def has_stylesheet(self) -> bool:
        return self.stylesheet_content is not None

    @property
    def is_fatal(self) -> bool:
        return self.error is not None and self.error.is_fatal


@dataclass(frozen=True)
class ArchiveListing:
    entry_names: Sequence[str] = field(default_factory=tuple)
    archive_path: str | None = None
    error: ResolutionError | None = None

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, archive_path: str | None = None) -> "ArchiveListing":
        return cls(archive_path=archive_path, error=ResolutionError(kind, message))

    @property
    def is_fatal(self) -> bool:
        return self.error is not None and self.error.is_fatal
