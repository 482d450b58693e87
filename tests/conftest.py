import io
import zipfile
from pathlib import Path
from typing import Iterable

import pytest


def build_zip(entries: Iterable[tuple[str, bytes | None]]) -> bytes:
    """Build an in-memory ZIP; a ``None`` payload adds a directory entry."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, content in entries:
            if content is None:
                archive.writestr(zipfile.ZipInfo(name), b"")
            else:
                archive.writestr(name, content)
    return buffer.getvalue()


XML_WITH_STYLE = b'<?xml version="1.0"?>\n<?xml-stylesheet type="text/xsl" href="style.xsl"?>\n<doc><a>1</a></doc>'
XSL_CONTENT = b'<xsl:stylesheet version="1.0" xmlns:xsl="http://www.w3.org/1999/XSL/Transform"/>'


@pytest.fixture
def zip_bytes() -> bytes:
    return build_zip(
        [
            ("dir/", None),
            ("dir/doc.xml", XML_WITH_STYLE),
            ("dir/style.xsl", XSL_CONTENT),
            ("other/style.xsl", b"<other/>"),
            ("plain.xml", b"<plain/>"),
        ]
    )


@pytest.fixture
def zip_path(tmp_path: Path, zip_bytes: bytes) -> Path:
    path = tmp_path / "bundle.zip"
    path.write_bytes(zip_bytes)
    return path


@pytest.fixture
def make_zip():
    return build_zip
