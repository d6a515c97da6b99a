from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def escape_value(value: str | None) -> str:
    """Escape a property value for vCard 3.0 text.

    The backslash goes first so the escapes added afterwards are not doubled.
    """
    if not value:
        return ""
    return (
        value.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace(",", "\\,")
        .replace(";", "\\;")
    )


def safe_filename(text: str | None) -> str:
    """Fold ``text`` to an ASCII path segment, e.g. ``José`` -> ``Jose``."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = _COMBINING_MARKS.sub("", decomposed)
    return _UNSAFE_FILENAME_CHARS.sub("_", stripped)
