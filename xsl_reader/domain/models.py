"""Domain models for stylesheet resolution.

These dataclasses describe container entries and the error values that travel
back to callers instead of exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    CONTAINER_OPEN_FAILURE = "ContainerOpenFailure"
    SOURCE_NOT_FOUND = "SourceNotFound"
    SOURCE_READ_FAILURE = "SourceReadFailure"
    STYLESHEET_NOT_FOUND = "StylesheetNotFound"
    STYLESHEET_READ_FAILURE = "StylesheetReadFailure"
    TRANSPORT_DECODE_FAILURE = "TransportDecodeFailure"

    @property
    def is_fatal(self) -> bool:
        return self not in (ErrorKind.STYLESHEET_NOT_FOUND, ErrorKind.STYLESHEET_READ_FAILURE)


@dataclass(frozen=True)
class ResolutionError:
    """Human-readable failure attached to a result."""

    kind: ErrorKind
    message: str

    @property
    def is_fatal(self) -> bool:
        return self.kind.is_fatal

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ContainerEntry:
    """A listable item inside a container.

    ``name`` is the full path as stored: forward-slash delimited for archive
    entries, platform form for directory entries.
    """

    name: str
    is_directory: bool = False
    size: int | None = None
