"""Central configuration for the XSL reader package."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_ENCODING = "utf-8"
DEFAULT_DECODE_ERRORS = "replace"
DEFAULT_LOG_LEVEL = "WARNING"

SOURCE_SUFFIXES = (".xml",)
STYLESHEET_SUFFIXES = (".xsl", ".xslt")
ARCHIVE_SUFFIXES = (".zip",)


@dataclass(slots=True, frozen=True)
class Settings:
    text_encoding: str = DEFAULT_ENCODING
    decode_errors: str = DEFAULT_DECODE_ERRORS
    source_suffixes: tuple[str, ...] = SOURCE_SUFFIXES
    stylesheet_suffixes: tuple[str, ...] = STYLESHEET_SUFFIXES
    archive_suffixes: tuple[str, ...] = ARCHIVE_SUFFIXES
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        text_encoding=env.get("XSL_READER_ENCODING", DEFAULT_ENCODING).strip() or DEFAULT_ENCODING,
        decode_errors=env.get("XSL_READER_DECODE_ERRORS", DEFAULT_DECODE_ERRORS).strip() or DEFAULT_DECODE_ERRORS,
        log_level=env.get("XSL_READER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
    )


SETTINGS = load_settings()
