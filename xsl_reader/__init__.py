"""Resolve XML documents together with the stylesheets they reference."""
from xsl_reader.application.use_cases import (
    list_archive_xml_entries,
    list_archive_xml_entries_from_bytes,
    resolve_document,
    resolve_document_in_archive,
    resolve_document_in_archive_bytes,
    resolve_document_with_stylesheet,
)
from xsl_reader.domain.models import ErrorKind
from xsl_reader.domain.results import ArchiveListing, DocumentPair
from xsl_reader.domain.services import ContainerDocumentResolver, StylesheetReferenceExtractor

__all__ = [
    "ArchiveListing",
    "ContainerDocumentResolver",
    "DocumentPair",
    "ErrorKind",
    "StylesheetReferenceExtractor",
    "list_archive_xml_entries",
    "list_archive_xml_entries_from_bytes",
    "resolve_document",
    "resolve_document_in_archive",
    "resolve_document_in_archive_bytes",
    "resolve_document_with_stylesheet",
]
