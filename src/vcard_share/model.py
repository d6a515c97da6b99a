from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

# Keys used by the mobile form that collects contacts.
_CAMEL_KEYS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "phone": "phone",
    "email": "email",
    "organization": "organization",
    "address": "address",
    "website": "website",
}


class ContactFieldError(ValueError):
    """Raised when a contact mapping carries keys that are not contact fields."""

    def __init__(self, unknown: list[str], duplicate: list[str] | None = None):
        self.unknown = unknown
        self.duplicate = duplicate or []
        problems = []
        if unknown:
            problems.append(f"Unknown contact field(s): {', '.join(unknown)}")
        if self.duplicate:
            problems.append(f"Contact field(s) given twice: {', '.join(self.duplicate)}")
        super().__init__("; ".join(problems))


@dataclass(frozen=True)
class ContactRecord:
    first_name: str | None = ""
    last_name: str | None = ""
    phone: str | None = ""
    email: str | None = ""
    organization: str | None = ""
    address: str | None = ""  # street;apt;city;state;postal;country
    website: str | None = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ContactRecord:
        """Build a record from form data.

        Accepts the form's camelCase keys as well as the attribute names.
        ``None`` becomes an empty string, other scalars go through ``str()``.
        Giving one field under both spellings (``firstName`` and
        ``first_name``) is an error.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        unknown: list[str] = []
        duplicate: list[str] = []
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in known:
                unknown.append(str(key))
                continue
            if name in values:
                duplicate.append(name)
                continue
            values[name] = "" if value is None else str(value)
        if unknown or duplicate:
            raise ContactFieldError(sorted(unknown), sorted(duplicate))
        return cls(**values)

    def address_parts(self) -> tuple[str, ...]:
        if not self.address:
            return ()
        return tuple(self.address.split(";"))

    def display_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


SAMPLE_CONTACT = ContactRecord(
    first_name="John",
    last_name="Doe",
    phone="+1234567890",
    email="john.doe@example.com",
    organization="Acme Corp",
    address="123 Main St;Apt 4;New York;NY;10001;USA",
    website="https://example.com",
)
