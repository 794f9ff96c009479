"""Tests for phone formatting used by dial and message actions."""

import pytest

from agenda.infrastructure.phone import dialable, to_e164


@pytest.mark.parametrize(
    "raw, region, expected",
    [
        ("+34 612 345 678", None, "+34612345678"),
        ("612 345 678", "ES", "+34612345678"),
        ("+34 612 345 678", "US", "+34612345678"),
        ("(202) 555-1234", "US", "+12025551234"),
    ],
)
def test_to_e164_for_dialling(raw, region, expected):
    assert to_e164(raw, region) == expected


@pytest.mark.parametrize("raw", ["", "   ", None, "call me", "+1", "555"])
def test_to_e164_rejects_unusable_numbers(raw):
    assert to_e164(raw, "US") is None


def test_local_number_without_region_does_not_parse():
    assert to_e164("612 345 678") is None


def test_dialable_uses_e164_when_possible():
    assert dialable("612 345 678", "ES") == "+34612345678"


def test_dialable_keeps_unparsed_numbers_without_spaces():
    assert dialable("555 12 34") == "5551234"
    assert dialable("*100#") == "*100#"
    assert dialable("") == ""
