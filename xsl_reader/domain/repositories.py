"""Container interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import ContainerEntry


class ContainerOpenError(Exception):
    """The container itself could not be opened or parsed."""


class EntryNotFoundError(LookupError):
    """The requested entry does not exist in the container."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


class Container(Protocol):
    """Opens entries and locates stylesheets relative to a source entry."""

    def open(self, name: str) -> bytes:
        """Return the full content of ``name`` or raise ``EntryNotFoundError``."""
        ...

    def locate(self, source_name: str, reference: str) -> str | None:
        """Return the entry name a stylesheet reference resolves to, if any."""
        ...


class ListableContainer(Container, Protocol):
    def list(self) -> Sequence[ContainerEntry]:
        ...


class EntryReadError(OSError):
    """The entry exists but its content could not be read."""
