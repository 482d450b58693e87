"""Streamlit front-end for the XML/XSL reader."""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Sequence

import pandas as pd
import streamlit as st

from xsl_reader import (
    DocumentPair,
    list_archive_xml_entries_from_bytes,
    resolve_document,
    resolve_document_in_archive_bytes,
    resolve_document_with_stylesheet,
)
from xsl_reader.application.dto import classify_inputs
from xsl_reader.config import SETTINGS
from xsl_reader.logger import setup_logging
from xsl_reader.presentation.formatting import format_xml, listing_to_rows
from xsl_reader.presentation.payload import document_pair_to_payload


setup_logging(SETTINGS.log_level)
st.set_page_config(page_title="XML/XSL Reader", layout="wide")
st.title("XML/XSL Reader")


def listing_dataframe(entry_names: Sequence[str]) -> pd.DataFrame:
    return pd.DataFrame(listing_to_rows(entry_names), columns=["folder", "file", "entry"])


def resolve_uploaded_document(uploads: dict[str, bytes], source: str, stylesheet: str | None) -> DocumentPair:
    # Uploads have no location on disk; stage them side by side so sibling lookup still applies.
    with tempfile.TemporaryDirectory() as workdir:
        for name, content in uploads.items():
            (Path(workdir) / Path(name).name).write_bytes(content)
        source_path = str(Path(workdir) / Path(source).name)
        if stylesheet:
            return resolve_document_with_stylesheet(source_path, str(Path(workdir) / Path(stylesheet).name))
        return resolve_document(source_path)


def show_document(pair: DocumentPair) -> None:
    if pair.error is not None:
        if pair.is_fatal:
            st.error(pair.error.message)
            return
        st.warning(pair.error.message)

    st.caption(f"XML: {pair.source_name}" + (f"  |  XSL: {pair.stylesheet_name}" if pair.stylesheet_name else ""))
    tabs = st.tabs(["XML", "XSL", "Payload"])
    with tabs[0]:
        st.code(format_xml(pair.source_content or ""), language="xml")
        st.download_button(
            "Download XML",
            data=(pair.source_content or "").encode(SETTINGS.text_encoding),
            file_name=pair.source_name or "document.xml",
            mime="application/xml",
        )
    with tabs[1]:
        if pair.has_stylesheet:
            st.code(pair.stylesheet_content, language="xml")
        else:
            st.info("No stylesheet resolved for this document.")
    with tabs[2]:
        st.json(document_pair_to_payload(pair))


if "pair" not in st.session_state:
    st.session_state["pair"] = None

uploaded = st.file_uploader(
    "Drop XML, XSL or ZIP files",
    type=["xml", "xsl", "xslt", "zip"],
    accept_multiple_files=True,
)

if not uploaded:
    st.session_state["pair"] = None
    st.info("Select an XML file (optionally with its stylesheet) or a ZIP archive.")
else:
    uploads = {file.name: file.getvalue() for file in uploaded}
    selection = classify_inputs(uploads.keys())

    if selection.mode == "archive":
        archive_bytes = uploads[selection.archive]
        listing = list_archive_xml_entries_from_bytes(archive_bytes)
        if listing.error is not None:
            st.error(listing.error.message)
        elif not listing.entry_names:
            st.warning(f"No XML files found in {selection.archive}")
        else:
            st.subheader(selection.archive)
            st.dataframe(listing_dataframe(listing.entry_names), hide_index=True, use_container_width=True)
            entry = st.selectbox("XML entry", listing.entry_names, key="archive_entry")
            if st.button("Open entry", key="open_entry_btn"):
                with st.spinner("Resolving..."):
                    st.session_state["pair"] = resolve_document_in_archive_bytes(archive_bytes, entry)
    elif selection.mode == "document":
        if st.button("Open document", key="open_document_btn"):
            with st.spinner("Resolving..."):
                st.session_state["pair"] = resolve_uploaded_document(uploads, selection.source, selection.stylesheet)
    else:
        st.warning("Select an XML file or a ZIP file.")

    pair = st.session_state.get("pair")
    if pair is not None:
        show_document(pair)
