"""Infrastructure layer: concrete implementations of application ports."""

from agenda.infrastructure.actions import UriContactActions
from agenda.infrastructure.address_book import CsvAddressBook, StaticAddressBook
from agenda.infrastructure.backup import (
    decode_contacts,
    encode_contacts,
    read_backup,
    write_backup,
)
from agenda.infrastructure.cards import export_cards, format_card, write_cards
from agenda.infrastructure.live import InvalidationTracker, LiveQuery
from agenda.infrastructure.persistence import (
    Database,
    SqlCategoryDao,
    SqlContactDao,
    SqlGroupDao,
)

__all__ = [
    "CsvAddressBook",
    "Database",
    "InvalidationTracker",
    "LiveQuery",
    "SqlCategoryDao",
    "SqlContactDao",
    "SqlGroupDao",
    "StaticAddressBook",
    "UriContactActions",
    "decode_contacts",
    "encode_contacts",
    "export_cards",
    "format_card",
    "read_backup",
    "write_backup",
    "write_cards",
]
