"""Display helpers for raw XML and archive listings."""
from __future__ import annotations

import re
from typing import Sequence

ROOT_FOLDER = "(root)"
PADDING = "  "

_ADJACENT_TAGS = re.compile(r"(>)(<)(/*)")
_LINE_CHAR = r"[^\r\n\u2028\u2029]"
_CLOSES_ON_SAME_LINE = re.compile(_LINE_CHAR + r"+</\w[^>]*>$")
_CLOSING_TAG = re.compile(r"^</\w")
_OPENING_TAG = re.compile(r"^<\w[^>]*[^/]>" + _LINE_CHAR + r"*$")


def format_xml(xml: str) -> str:
    """Indent XML text line by line without parsing it.

    Adjacent tags are split onto their own lines, then each opening tag
    indents the following lines and each closing tag dedents.
    """
    lines = _ADJACENT_TAGS.sub(r"\1\n\2\3", xml).split("\n")
    pad = 0
    formatted: list[str] = []
    for node in lines:
        indent = 0
        if _CLOSES_ON_SAME_LINE.search(node):
            indent = 0
        elif _CLOSING_TAG.search(node):
            if pad != 0:
                pad -= 1
        elif _OPENING_TAG.search(node):
            indent = 1
        formatted.append(PADDING * pad + node)
        pad += indent
    return "\n".join(formatted)


def group_entries_by_folder(names: Sequence[str]) -> dict[str, list[tuple[str, str]]]:
    folders: dict[str, list[tuple[str, str]]] = {}
    for name in names:
        folder, _, base = name.rpartition("/")
        folders.setdefault(folder or ROOT_FOLDER, []).append((name, base))
    return {folder: folders[folder] for folder in sorted(folders)}


def listing_to_rows(names: Sequence[str]) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for folder, files in group_entries_by_folder(names).items():
        for full_name, base in files:
            rows.append({"folder": folder, "file": base, "entry": full_name})
    return rows
