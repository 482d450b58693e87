from pathlib import Path

import pytest

from xsl_reader.application.use_cases import (
    list_archive_xml_entries,
    list_archive_xml_entries_from_bytes,
    resolve_document,
    resolve_document_in_archive,
    resolve_document_in_archive_bytes,
    resolve_document_with_stylesheet,
)
from xsl_reader.domain.models import ErrorKind

XML = b'<?xml version="1.0"?>\n<?xml-stylesheet type="text/xsl" href="style.xsl"?>\n<doc/>'


@pytest.fixture
def folder(tmp_path: Path) -> Path:
    (tmp_path / "doc.xml").write_bytes(XML)
    (tmp_path / "style.xsl").write_bytes(b"<xsl/>")
    (tmp_path / "other.xsl").write_bytes(b"<other/>")
    (tmp_path / "orphan.xml").write_bytes(b'<?xml-stylesheet href="gone.xsl"?><orphan/>')
    return tmp_path


def test_resolve_document_loads_sibling(folder: Path):
    pair = resolve_document(str(folder / "doc.xml"))

    assert pair.error is None
    assert pair.source_name == "doc.xml"
    assert pair.source_content == XML.decode()
    assert pair.stylesheet_name == "style.xsl"
    assert pair.stylesheet_content == "<xsl/>"


def test_resolve_document_missing_stylesheet(folder: Path):
    pair = resolve_document(str(folder / "orphan.xml"))

    assert pair.source_name == "orphan.xml"
    assert pair.error.kind is ErrorKind.STYLESHEET_NOT_FOUND
    assert "gone.xsl" in pair.error.message
    assert pair.stylesheet_content is None


def test_resolve_document_missing_source(folder: Path):
    pair = resolve_document(str(folder / "missing.xml"))

    assert pair.error.kind is ErrorKind.SOURCE_NOT_FOUND
    assert pair.source_content is None


def test_explicit_stylesheet_overrides_reference(folder: Path):
    pair = resolve_document_with_stylesheet(str(folder / "doc.xml"), str(folder / "other.xsl"))

    assert pair.error is None
    assert pair.stylesheet_name == "other.xsl"
    assert pair.stylesheet_content == "<other/>"


def test_explicit_stylesheet_missing_is_partial(folder: Path):
    pair = resolve_document_with_stylesheet(str(folder / "doc.xml"), str(folder / "nope.xsl"))

    assert pair.source_content == XML.decode()
    assert pair.error.kind is ErrorKind.STYLESHEET_NOT_FOUND
    assert pair.stylesheet_name is None


def test_explicit_stylesheet_missing_source(folder: Path):
    pair = resolve_document_with_stylesheet(str(folder / "none.xml"), str(folder / "other.xsl"))

    assert pair.error.kind is ErrorKind.SOURCE_NOT_FOUND


def test_list_archive_from_path(zip_path: Path):
    listing = list_archive_xml_entries(zip_path)

    assert listing.error is None
    assert listing.archive_path == str(zip_path)
    assert list(listing.entry_names) == ["dir/doc.xml", "plain.xml"]


def test_list_archive_from_bytes(zip_bytes: bytes):
    listing = list_archive_xml_entries_from_bytes(zip_bytes)

    assert listing.archive_path is None
    assert list(listing.entry_names) == ["dir/doc.xml", "plain.xml"]


def test_list_archive_bad_path(tmp_path: Path):
    listing = list_archive_xml_entries(tmp_path / "missing.zip")

    assert listing.error.kind is ErrorKind.CONTAINER_OPEN_FAILURE
    assert listing.is_fatal
    assert list(listing.entry_names) == []


def test_list_archive_bad_bytes():
    listing = list_archive_xml_entries_from_bytes(b"garbage")

    assert listing.error.kind is ErrorKind.CONTAINER_OPEN_FAILURE


def test_resolve_in_archive_path(zip_path: Path):
    pair = resolve_document_in_archive(zip_path, "dir/doc.xml")

    assert pair.error is None
    assert pair.source_name == "doc.xml"
    assert pair.stylesheet_name == "style.xsl"
    assert pair.stylesheet_content.startswith("<xsl:stylesheet")


def test_resolve_in_archive_bytes_missing_entry(zip_bytes: bytes):
    pair = resolve_document_in_archive_bytes(zip_bytes, "dir/missing.xml")

    assert pair.error.kind is ErrorKind.SOURCE_NOT_FOUND
    assert pair.source_content is None


def test_resolve_in_archive_bad_container(tmp_path: Path):
    broken = tmp_path / "broken.zip"
    broken.write_bytes(b"PK\x03\x04 nope")

    pair = resolve_document_in_archive(broken, "doc.xml")

    assert pair.error.kind is ErrorKind.CONTAINER_OPEN_FAILURE
    assert pair.source_content is None


def test_resolve_in_archive_bytes_not_found_stylesheet(make_zip):
    data = make_zip([("doc.xml", b'<?xml-stylesheet href="x.xsl"?><d/>')])

    pair = resolve_document_in_archive_bytes(data, "doc.xml")

    assert pair.source_content == '<?xml-stylesheet href="x.xsl"?><d/>'
    assert pair.error.kind is ErrorKind.STYLESHEET_NOT_FOUND


def test_archive_file_unchanged_after_resolve(zip_path: Path):
    before = zip_path.read_bytes()
    first = resolve_document_in_archive(zip_path, "dir/doc.xml")
    second = resolve_document_in_archive(zip_path, "dir/doc.xml")

    assert first == second
    assert zip_path.read_bytes() == before


def test_resolve_document_empty_name():
    pair = resolve_document("")

    assert pair.error.kind is ErrorKind.SOURCE_NOT_FOUND


def test_resolve_document_directory_path(folder: Path):
    pair = resolve_document(str(folder))

    assert pair.error.kind is ErrorKind.SOURCE_NOT_FOUND


def test_resolve_document_unreadable_source(folder: Path, monkeypatch):
    def deny(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_bytes", deny)

    pair = resolve_document(str(folder / "doc.xml"))

    assert pair.error.kind is ErrorKind.SOURCE_READ_FAILURE
    assert pair.source_content is None


def test_resolve_document_unreadable_stylesheet(folder: Path, monkeypatch):
    original = Path.read_bytes

    def deny_stylesheets(self):
        if self.suffix == ".xsl":
            raise PermissionError(13, "Permission denied", str(self))
        return original(self)

    monkeypatch.setattr(Path, "read_bytes", deny_stylesheets)

    pair = resolve_document(str(folder / "doc.xml"))

    assert pair.source_content == XML.decode()
    assert pair.error.kind is ErrorKind.STYLESHEET_READ_FAILURE
    assert pair.stylesheet_name is None


def _with_bad_version(data: bytes) -> bytes:
    patched = bytearray(data)
    patched[patched.index(b"PK\x01\x02") + 6] = 159
    return bytes(patched)


def test_malformed_archive_bytes_return_open_failure(zip_bytes: bytes):
    data = _with_bad_version(zip_bytes)

    assert list_archive_xml_entries_from_bytes(data).error.kind is ErrorKind.CONTAINER_OPEN_FAILURE
    assert resolve_document_in_archive_bytes(data, "dir/doc.xml").error.kind is ErrorKind.CONTAINER_OPEN_FAILURE


def test_malformed_archive_path_returns_open_failure(tmp_path: Path, zip_bytes: bytes):
    path = tmp_path / "bad.zip"
    path.write_bytes(_with_bad_version(zip_bytes))

    assert list_archive_xml_entries(path).error.kind is ErrorKind.CONTAINER_OPEN_FAILURE
    assert resolve_document_in_archive(path, "dir/doc.xml").error.kind is ErrorKind.CONTAINER_OPEN_FAILURE
