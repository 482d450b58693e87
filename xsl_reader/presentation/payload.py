"""Boundary serialization for viewer shells."""
from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from xsl_reader.domain.models import ResolutionError
from xsl_reader.domain.results import ArchiveListing, DocumentPair

_DATA_URL_MARKER = ";base64,"


class TransportDecodeError(ValueError):
    """A transport-encoded archive blob could not be turned back into bytes."""


def _error_fields(error: ResolutionError | None) -> dict[str, str | None]:
    if error is None:
        return {"error": None, "errorKind": None}
    return {"error": error.message, "errorKind": error.kind.value}


def document_pair_to_payload(pair: DocumentPair) -> dict[str, Any]:
    return {
        "xmlContent": pair.source_content,
        "xslContent": pair.stylesheet_content,
        "xmlFile": pair.source_name,
        "xslFile": pair.stylesheet_name,
        **_error_fields(pair.error),
    }


def listing_to_payload(listing: ArchiveListing) -> dict[str, Any]:
    return {
        "xmlFiles": list(listing.entry_names),
        "zipPath": listing.archive_path,
        **_error_fields(listing.error),
    }


def to_json(payload: dict[str, Any], indent: int | None = None) -> str:
    separators = None if indent else (",", ":")
    return json.dumps(payload, ensure_ascii=False, indent=indent, separators=separators)


def decode_transport_blob(text: str) -> bytes:
    """Decode a base64 archive blob, optionally wrapped in a data URL."""
    blob = text.strip()
    if blob.startswith("data:") and _DATA_URL_MARKER in blob:
        blob = blob.split(_DATA_URL_MARKER, 1)[1]
    try:
        return base64.b64decode(blob, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise TransportDecodeError(f"Failed to decode ZIP data: {exc}") from exc
