"""Tests for the JSON backup codec."""

import json

import pytest

from agenda.application import SerializationError
from agenda.domain import Contact
from agenda.infrastructure import decode_contacts, encode_contacts, read_backup, write_backup

ANA = Contact(
    id=7,
    name="Ana",
    phone="555",
    email="a@b.com",
    category_id=2,
    linkedin="ana",
    website="ana.dev",
)
BOB = Contact(id=8, name="Bob", phone="666")


def test_encode_writes_every_field_and_explicit_nulls() -> None:
    data = json.loads(encode_contacts([ANA, BOB]))
    assert data == [
        {
            "id": 7,
            "name": "Ana",
            "phone": "555",
            "email": "a@b.com",
            "category_id": 2,
            "linkedin": "ana",
            "website": "ana.dev",
        },
        {
            "id": 8,
            "name": "Bob",
            "phone": "666",
            "email": None,
            "category_id": None,
            "linkedin": "",
            "website": "",
        },
    ]


def test_decode_restores_records_in_order() -> None:
    assert decode_contacts(encode_contacts([BOB, ANA])) == [BOB, ANA]


def test_encode_of_decode_reproduces_input() -> None:
    text = json.dumps(
        [
            {
                "id": 1,
                "name": "Carla",
                "phone": "777",
                "email": None,
                "category_id": None,
                "linkedin": "",
                "website": "carla.io",
            }
        ]
    )
    assert json.loads(encode_contacts(decode_contacts(text))) == json.loads(text)


def test_decode_accepts_spanish_field_names() -> None:
    text = json.dumps(
        [
            {
                "id": 3,
                "nombre": "Pedro",
                "telefono": "600111222",
                "email": "",
                "categoriaId": 1,
                "linkedin": "Pedro",
                "website": None,
            }
        ]
    )
    assert decode_contacts(text) == [
        Contact(
            id=3,
            name="Pedro",
            phone="600111222",
            email="",
            category_id=1,
            linkedin="Pedro",
            website="",
        )
    ]


def test_decode_empty_array() -> None:
    assert decode_contacts("[]") == []


@pytest.mark.parametrize(
    "text",
    [
        "",
        "not json",
        '[{"name": "Ana", "phone": "555"',
        '{"name": "Ana", "phone": "555"}',
        '[{"name": "Ana"}]',
        '[{"name": "Ana", "phone": "555"}, {"phone": "666"}]',
        '[{"name": "Ana", "phone": "555", "category_id": "work"}]',
    ],
)
def test_decode_rejects_malformed_or_mismatched(text) -> None:
    with pytest.raises(SerializationError):
        decode_contacts(text)


def test_write_then_read_backup_file(tmp_path) -> None:
    path = tmp_path / "contacts.json"
    assert write_backup(path, [ANA, BOB]) is True
    assert read_backup(path) == [ANA, BOB]


def test_read_backup_returns_none_on_bad_file(tmp_path) -> None:
    assert read_backup(tmp_path / "missing.json") is None

    broken = tmp_path / "broken.json"
    broken.write_text('[{"name": "Ana", "phone": "555"}, {"name": ', encoding="utf-8")
    assert read_backup(broken) is None


def test_write_backup_returns_false_when_unwritable(tmp_path) -> None:
    assert write_backup(tmp_path / "no-such-dir" / "contacts.json", [ANA]) is False
