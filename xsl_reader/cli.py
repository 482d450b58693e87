"""Command-line entrypoint for resolving XML documents and their stylesheets."""
from __future__ import annotations

import argparse
import sys
from typing import Any

from xsl_reader.application.use_cases import (
    list_archive_xml_entries,
    list_archive_xml_entries_from_bytes,
    resolve_document,
    resolve_document_in_archive,
    resolve_document_in_archive_bytes,
    resolve_document_with_stylesheet,
)
from xsl_reader.config import SETTINGS
from xsl_reader.domain.models import ErrorKind
from xsl_reader.logger import setup_logging
from xsl_reader.presentation.payload import (
    TransportDecodeError,
    decode_transport_blob,
    document_pair_to_payload,
    listing_to_payload,
    to_json,
)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve XML documents and their xml-stylesheet references")
    parser.add_argument("--log-level", type=str, default=SETTINGS.log_level, help="Logging level (default: %(default)s)")
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    commands = parser.add_subparsers(dest="command", required=True)

    resolve = commands.add_parser("resolve", help="Resolve an XML file on disk")
    resolve.add_argument("path", type=str, help="Path to the XML file")
    resolve.add_argument("--stylesheet", type=str, help="Use this stylesheet instead of the referenced one")

    listing = commands.add_parser("list-archive", help="List XML entries in a ZIP archive")
    listing.add_argument("path", type=str, nargs="?", help="Path to the ZIP file")
    listing.add_argument("--base64-stdin", action="store_true", help="Read a base64-encoded archive from stdin")

    archive = commands.add_parser("resolve-archive", help="Resolve an XML entry inside a ZIP archive")
    archive.add_argument("targets", type=str, nargs="+", metavar="TARGET", help="ZIP path and entry name, or just the entry name with --base64-stdin")
    archive.add_argument("--base64-stdin", action="store_true", help="Read a base64-encoded archive from stdin")

    args = parser.parse_args(argv)
    if args.command == "list-archive" and not (args.path or args.base64_stdin):
        parser.error("list-archive requires PATH or --base64-stdin")
    if args.command == "resolve-archive":
        expected = 1 if args.base64_stdin else 2
        if len(args.targets) != expected:
            parser.error("resolve-archive expects ENTRY with --base64-stdin, otherwise PATH ENTRY")
    return args


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    print(to_json(payload, indent=2 if pretty else None))


def _transport_failure(exc: TransportDecodeError) -> dict[str, Any]:
    return {"error": str(exc), "errorKind": ErrorKind.TRANSPORT_DECODE_FAILURE.value}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level.upper(), stream=sys.stderr)

    if args.command == "resolve":
        if args.stylesheet:
            pair = resolve_document_with_stylesheet(args.path, args.stylesheet)
        else:
            pair = resolve_document(args.path)
        _emit(document_pair_to_payload(pair), args.pretty)
        return 1 if pair.is_fatal else 0

    data = None
    if args.base64_stdin:
        try:
            data = decode_transport_blob(sys.stdin.read())
        except TransportDecodeError as exc:
            _emit(_transport_failure(exc), args.pretty)
            return 1

    if args.command == "list-archive":
        listing = list_archive_xml_entries_from_bytes(data) if data is not None else list_archive_xml_entries(args.path)
        _emit(listing_to_payload(listing), args.pretty)
        return 1 if listing.is_fatal else 0

    if data is not None:
        pair = resolve_document_in_archive_bytes(data, args.targets[0])
    else:
        pair = resolve_document_in_archive(args.targets[0], args.targets[1])
    _emit(document_pair_to_payload(pair), args.pretty)
    return 1 if pair.is_fatal else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
