"""Domain services implementing stylesheet discovery and resolution."""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from xsl_reader.config import SETTINGS, Settings

from .models import ContainerEntry, ErrorKind
from .repositories import Container, EntryNotFoundError, EntryReadError
from .results import DocumentPair

logger = logging.getLogger(__name__)

PI_OPEN = "<?xml-stylesheet"
PI_CLOSE = "?>"
HREF_MARKER = 'href="'

_SEPARATORS = "/\\"


class StylesheetReferenceExtractor:
    """Finds the ``href`` of the first ``xml-stylesheet`` instruction that has one.

    This is a plain substring scan, not an XML parser. Markers are
    case-sensitive, only double-quoted values are recognised, and an
    instruction without a closing ``?>`` ends the search.
    """

    def extract(self, xml_text: str) -> str | None:
        start = 0
        while True:
            open_at = xml_text.find(PI_OPEN, start)
            if open_at == -1:
                return None
            close_at = xml_text.find(PI_CLOSE, open_at)
            if close_at == -1:
                return None
            end = close_at + len(PI_CLOSE)
            instruction = xml_text[open_at:end]

            href_at = instruction.find(HREF_MARKER)
            if href_at != -1:
                value_start = href_at + len(HREF_MARKER)
                value_end = instruction.find('"', value_start)
                if value_end != -1:
                    return instruction[value_start:value_end]
            start = end


def split_entry_name(name: str) -> tuple[str, str]:
    """Split ``name`` into (directory context, base name).

    Both separators are honoured; trailing separators are trimmed from the
    context, which is empty when there is no directory component.
    """
    cut = max(name.rfind("/"), name.rfind("\\"))
    if cut == -1:
        return "", name
    return name[:cut].rstrip(_SEPARATORS), name[cut + 1 :]


def base_name(name: str) -> str:
    return split_entry_name(name)[1]


def sibling_candidate(source_name: str, reference: str) -> str:
    context, _ = split_entry_name(source_name)
    if not context:
        return reference
    return f"{context}/{reference}"


def _same(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


MatchRule = Callable[[ContainerEntry, str, str], bool]


def _rule_sibling(entry: ContainerEntry, sibling: str, reference: str) -> bool:
    return _same(entry.name, sibling)


def _rule_full_name(entry: ContainerEntry, sibling: str, reference: str) -> bool:
    return _same(entry.name, reference)


def _rule_base_name(entry: ContainerEntry, sibling: str, reference: str) -> bool:
    return _same(base_name(entry.name), base_name(reference))


MATCH_RULES: tuple[tuple[str, MatchRule], ...] = (
    ("sibling", _rule_sibling),
    ("full-name", _rule_full_name),
    ("base-name", _rule_base_name),
)


def match_stylesheet_entry(
    entries: Iterable[ContainerEntry], source_name: str, reference: str
) -> str | None:
    """Return the entry a reference points at, trying each rule in order.

    Within a rule the first listed entry wins.
    """
    files = [entry for entry in entries if not entry.is_directory]
    sibling = sibling_candidate(source_name, reference)
    for rule_name, rule in MATCH_RULES:
        for entry in files:
            if rule(entry, sibling, reference):
                logger.debug("Stylesheet %r matched %r by %s rule", reference, entry.name, rule_name)
                return entry.name
    return None


def decode_text(raw: bytes, settings: Settings | None = None) -> str:
    settings = settings or SETTINGS
    return raw.decode(settings.text_encoding, errors=settings.decode_errors)


class ContainerDocumentResolver:
    """Loads a source document and the stylesheet it references from one container."""

    def __init__(
        self,
        extractor: StylesheetReferenceExtractor | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._extractor = extractor or StylesheetReferenceExtractor()
        self._settings = settings or SETTINGS

    def resolve(self, container: Container, source_entry_name: str) -> DocumentPair:
        try:
            source_content = decode_text(container.open(source_entry_name), self._settings)
        except EntryNotFoundError:
            return DocumentPair.failure(ErrorKind.SOURCE_NOT_FOUND, f"XML file not found: {source_entry_name}")
        except (EntryReadError, UnicodeDecodeError) as exc:
            return DocumentPair.failure(
                ErrorKind.SOURCE_READ_FAILURE, f"Failed to read XML file {source_entry_name}: {exc}"
            )

        pair = DocumentPair(source_content=source_content, source_name=base_name(source_entry_name))
        reference = self._extractor.extract(source_content)
        if not reference:
            logger.info("Resolved %s without stylesheet reference", source_entry_name)
            return pair
        return self._attach_stylesheet(container, source_entry_name, reference, pair)

    def _attach_stylesheet(
        self, container: Container, source_entry_name: str, reference: str, pair: DocumentPair
    ) -> DocumentPair:
        entry_name = container.locate(source_entry_name, reference)
        if entry_name is None:
            logger.warning("Stylesheet %r referenced by %s not found", reference, source_entry_name)
            return pair.with_error(ErrorKind.STYLESHEET_NOT_FOUND, f"Stylesheet not found: {reference}")
        try:
            content = decode_text(container.open(entry_name), self._settings)
        except (EntryNotFoundError, EntryReadError, UnicodeDecodeError) as exc:
            logger.warning("Stylesheet %s could not be read: %s", entry_name, exc)
            return pair.with_error(
                ErrorKind.STYLESHEET_READ_FAILURE, f"Failed to read stylesheet {reference}: {exc}"
            )
        logger.info("Resolved %s with stylesheet %s", source_entry_name, entry_name)
        return pair.with_stylesheet(reference, content)
