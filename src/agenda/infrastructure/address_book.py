"""Address book sources for device import."""

import csv
from pathlib import Path

from agenda.application.dto import DeviceContact
from agenda.application.errors import ExternalSourceError


class CsvAddressBook:
    """Reads (name, phone) rows from a CSV export of the device address book.

    A header row naming "name" and "phone" columns is used when present;
    otherwise the first two columns are taken. Rows come back sorted by name.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    def query_address_book(self) -> list[DeviceContact]:
        try:
            with self._path.open(newline="", encoding=self._encoding) as f:
                rows = [row for row in csv.reader(f) if row]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise ExternalSourceError(f"Could not read {self._path}: {e}") from e
        if not rows:
            return []

        header = [cell.strip().lower() for cell in rows[0]]
        name_col, phone_col = 0, 1
        if "name" in header and "phone" in header:
            name_col, phone_col = header.index("name"), header.index("phone")
            rows = rows[1:]

        out = []
        for row in rows:
            if len(row) <= max(name_col, phone_col):
                raise ExternalSourceError(f"Malformed row in {self._path}: {row!r}")
            out.append(DeviceContact(row[name_col].strip(), row[phone_col]))
        return sorted(out, key=lambda c: c.display_name)


class StaticAddressBook:
    """In-memory address book, for hosts that already hold the rows."""

    def __init__(self, entries: list[tuple[str, str]]) -> None:
        self._entries = [DeviceContact(name, phone) for name, phone in entries]

    def query_address_book(self) -> list[DeviceContact]:
        return list(self._entries)
