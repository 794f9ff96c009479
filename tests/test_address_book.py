"""Tests for the CSV address book source."""

import pytest

from agenda.application import DeviceContact, ExternalSourceError
from agenda.infrastructure import CsvAddressBook


def test_reads_named_columns_sorted_by_name(tmp_path):
    path = tmp_path / "book.csv"
    path.write_text("phone,name,email\n600 111,Zoe,z@x.com\n600 222,Ana,\n", encoding="utf-8")
    assert CsvAddressBook(path).query_address_book() == [
        DeviceContact("Ana", "600 222"),
        DeviceContact("Zoe", "600 111"),
    ]


def test_headerless_file_uses_first_two_columns(tmp_path):
    path = tmp_path / "book.csv"
    path.write_text("Bob,777\n\nAna,555\n", encoding="utf-8")
    assert CsvAddressBook(path).query_address_book() == [
        DeviceContact("Ana", "555"),
        DeviceContact("Bob", "777"),
    ]


def test_empty_file(tmp_path):
    path = tmp_path / "book.csv"
    path.write_text("", encoding="utf-8")
    assert CsvAddressBook(path).query_address_book() == []


def test_missing_file_is_external_source_error(tmp_path):
    with pytest.raises(ExternalSourceError):
        CsvAddressBook(tmp_path / "missing.csv").query_address_book()


def test_short_row_is_external_source_error(tmp_path):
    path = tmp_path / "book.csv"
    path.write_text("name,phone\nAna\n", encoding="utf-8")
    with pytest.raises(ExternalSourceError):
        CsvAddressBook(path).query_address_book()
