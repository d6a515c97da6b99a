from __future__ import annotations

import dataclasses

import pytest

from vcard_share.model import SAMPLE_CONTACT, ContactFieldError, ContactRecord


def test_record_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SAMPLE_CONTACT.first_name = "Jane"  # type: ignore[misc]


def test_from_mapping_camel_case():
    c = ContactRecord.from_mapping({"firstName": "John", "lastName": "Doe", "website": "https://x"})
    assert c == ContactRecord(first_name="John", last_name="Doe", website="https://x")


def test_from_mapping_snake_case_and_coercion():
    c = ContactRecord.from_mapping({"first_name": "Ann", "phone": 5551234, "email": None})
    assert c.first_name == "Ann"
    assert c.phone == "5551234"
    assert c.email == ""


def test_from_mapping_unknown_keys():
    with pytest.raises(ContactFieldError) as exc:
        ContactRecord.from_mapping({"firstName": "A", "nickname": "B", "age": 3})
    assert exc.value.unknown == ["age", "nickname"]
    assert isinstance(exc.value, ValueError)


def test_address_parts():
    assert SAMPLE_CONTACT.address_parts() == ("123 Main St", "Apt 4", "New York", "NY", "10001", "USA")
    assert ContactRecord(address="A;B").address_parts() == ("A", "B")
    assert ContactRecord().address_parts() == ()


def test_display_name():
    assert SAMPLE_CONTACT.display_name() == "John Doe"
    assert ContactRecord(last_name="Doe").display_name() == "Doe"
    assert ContactRecord().display_name() == ""


def test_from_mapping_same_field_twice():
    with pytest.raises(ContactFieldError) as exc:
        ContactRecord.from_mapping({"firstName": "Ann", "first_name": "Anne", "lastName": "Lee"})
    assert exc.value.duplicate == ["first_name"]
    assert exc.value.unknown == []
    assert "given twice" in str(exc.value)
