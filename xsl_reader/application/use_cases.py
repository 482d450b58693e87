"""Application services exposed to the viewer shells.

Each operation builds its container for the duration of one call and always
returns a value; container failures become errors on the result.
"""
from __future__ import annotations

import logging
from pathlib import Path

from xsl_reader.config import SETTINGS, Settings
from xsl_reader.domain.models import ErrorKind
from xsl_reader.domain.repositories import (
    ContainerOpenError,
    EntryNotFoundError,
    EntryReadError,
    ListableContainer,
)
from xsl_reader.domain.results import ArchiveListing, DocumentPair
from xsl_reader.domain.services import ContainerDocumentResolver, base_name, decode_text
from xsl_reader.infrastructure.containers.archive import ArchiveContainer
from xsl_reader.infrastructure.containers.directory import PlainDirectoryContainer

logger = logging.getLogger(__name__)


def resolve_document(path: str, settings: Settings | None = None) -> DocumentPair:
    resolver = ContainerDocumentResolver(settings=settings)
    return resolver.resolve(PlainDirectoryContainer(), path)


def resolve_document_with_stylesheet(
    path: str, stylesheet_path: str, settings: Settings | None = None
) -> DocumentPair:
    """Load a source document paired with an explicitly chosen stylesheet."""
    settings = settings or SETTINGS
    container = PlainDirectoryContainer()
    try:
        source_content = decode_text(container.open(path), settings)
    except EntryNotFoundError:
        return DocumentPair.failure(ErrorKind.SOURCE_NOT_FOUND, f"XML file not found: {path}")
    except (EntryReadError, UnicodeDecodeError) as exc:
        return DocumentPair.failure(ErrorKind.SOURCE_READ_FAILURE, f"Failed to read XML file {path}: {exc}")

    pair = DocumentPair(source_content=source_content, source_name=base_name(path))
    stylesheet_name = base_name(stylesheet_path)
    try:
        stylesheet_content = decode_text(container.open(stylesheet_path), settings)
    except EntryNotFoundError:
        return pair.with_error(ErrorKind.STYLESHEET_NOT_FOUND, f"Stylesheet not found: {stylesheet_name}")
    except (EntryReadError, UnicodeDecodeError) as exc:
        return pair.with_error(
            ErrorKind.STYLESHEET_READ_FAILURE, f"Failed to read stylesheet {stylesheet_name}: {exc}"
        )
    return pair.with_stylesheet(stylesheet_name, stylesheet_content)


def _list_entries(container: ListableContainer, archive_path: str | None = None) -> ArchiveListing:
    names = tuple(entry.name for entry in container.list())
    logger.info("Archive %s lists %d XML entries", archive_path or "<bytes>", len(names))
    return ArchiveListing(entry_names=names, archive_path=archive_path)


def list_archive_xml_entries(path: str | Path, settings: Settings | None = None) -> ArchiveListing:
    try:
        container = ArchiveContainer.from_path(path, settings=settings)
    except ContainerOpenError as exc:
        return ArchiveListing.failure(ErrorKind.CONTAINER_OPEN_FAILURE, str(exc), archive_path=str(path))
    with container:
        return _list_entries(container, container.path)


def list_archive_xml_entries_from_bytes(data: bytes, settings: Settings | None = None) -> ArchiveListing:
    try:
        container = ArchiveContainer.from_bytes(data, settings=settings)
    except ContainerOpenError as exc:
        return ArchiveListing.failure(ErrorKind.CONTAINER_OPEN_FAILURE, str(exc))
    with container:
        return _list_entries(container)


def resolve_document_in_archive(
    path: str | Path, entry_name: str, settings: Settings | None = None
) -> DocumentPair:
    try:
        container = ArchiveContainer.from_path(path, settings=settings)
    except ContainerOpenError as exc:
        return DocumentPair.failure(ErrorKind.CONTAINER_OPEN_FAILURE, str(exc))
    with container:
        return ContainerDocumentResolver(settings=settings).resolve(container, entry_name)


def resolve_document_in_archive_bytes(
    data: bytes, entry_name: str, settings: Settings | None = None
) -> DocumentPair:
    try:
        container = ArchiveContainer.from_bytes(data, settings=settings)
    except ContainerOpenError as exc:
        return DocumentPair.failure(ErrorKind.CONTAINER_OPEN_FAILURE, str(exc))
    with container:
        return ContainerDocumentResolver(settings=settings).resolve(container, entry_name)
