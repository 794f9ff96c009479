"""Result types for repository use cases and input DTOs."""

from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar

from agenda.application.errors import AgendaError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The use case completed. value is its payload (None when there is nothing to return)."""

    value: T = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """The use case failed. error is the AgendaError that stopped it."""

    error: AgendaError

    @property
    def ok(self) -> bool:
        return False

    @property
    def reason(self) -> str:
        return self.error.reason


Result = Ok[T] | Err


class DeviceContact(NamedTuple):
    """One (display name, phone number) row read from the device address book."""

    display_name: str
    phone_number: str
