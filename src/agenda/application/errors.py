"""Error types raised inside the core and returned wrapped in Err by the repository."""


class AgendaError(Exception):
    """Base class for every failure the repository reports as Err."""

    @property
    def reason(self) -> str:
        return str(self) or self.__class__.__name__


class ValidationError(AgendaError):
    """Blank required field or malformed email. Raised before any write."""

    def __init__(self, reasons: dict[str, str]) -> None:
        self.reasons = dict(reasons)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.reasons.items()))


class PersistenceError(AgendaError):
    """The underlying store failed. The driver exception is chained as __cause__."""


class SerializationError(AgendaError):
    """A backup file is malformed or does not match the contact schema."""


class ExternalSourceError(AgendaError):
    """The device address book could not be read."""
