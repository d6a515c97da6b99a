from __future__ import annotations

import logging
from typing import Callable

from .config import Settings
from .escape import escape_value, safe_filename
from .model import ContactRecord

logger = logging.getLogger(__name__)

CRLF = "\r\n"

TraceHook = Callable[[str], None]


def encode_vcard(contact: ContactRecord, trace: TraceHook | None = None) -> str:
    """Encode ``contact`` as a vCard 3.0 text block.

    Every line, the last included, ends with CRLF. Empty optional fields are
    left out entirely; N and FN are always written. ``trace`` is called with
    each content line in the order it is emitted.
    """
    lines: list[str] = ["BEGIN:VCARD", "VERSION:3.0"]

    last = escape_value(contact.last_name)
    first = escape_value(contact.first_name)
    lines.append(f"N:{last};{first};;;")
    lines.append(f"FN:{first} {last}".strip())

    if contact.organization:
        lines.append(f"ORG:{escape_value(contact.organization)}")
    if contact.phone:
        lines.append(f"TEL;TYPE=CELL:{escape_value(contact.phone)}")
    if contact.email:
        lines.append(f"EMAIL;TYPE=INTERNET:{escape_value(contact.email)}")
    if contact.address:
        # Split before escaping: a ';' inside one component always separates.
        parts = [escape_value(p) for p in contact.address_parts()]
        lines.append("ADR;TYPE=HOME:;;" + ";".join(parts))
    if contact.website:
        lines.append(f"URL:{escape_value(contact.website)}")

    lines.append("END:VCARD")

    if trace is not None:
        for line in lines:
            trace(line)

    text = CRLF.join(lines) + CRLF
    logger.debug(
        "Encoded vCard for %r: %d line(s), %d byte(s)",
        contact.display_name(), len(lines), len(text.encode("utf-8")),
    )
    return text


def share_filename(contact: ContactRecord, settings: Settings | None = None) -> str:
    """Name for the shared ``.vcf`` artifact, e.g. ``Jose_Doe.vcf``."""
    settings = settings or Settings()
    first = safe_filename(contact.first_name) or settings.fallback_first
    last = safe_filename(contact.last_name) or settings.fallback_last
    return f"{first}_{last}{settings.extension}"
