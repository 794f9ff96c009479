"""Domain entities: Contact, Category, Group and the contact-group link."""

from dataclasses import dataclass, field

# Sentinel id for a contact that has not been stored yet.
NEW_CONTACT_ID = 0


@dataclass(frozen=True)
class Category:
    """Single-valued classification tag attachable to a contact."""

    name: str
    id: int = 0


@dataclass(frozen=True)
class Group:
    """Many-valued tag; a contact may belong to several groups."""

    name: str
    id: int = 0


@dataclass(frozen=True)
class Contact:
    """
    A person record. id == NEW_CONTACT_ID until the store assigns one.
    linkedin holds only the profile slug; website holds the full URL.
    """

    name: str
    phone: str
    email: str | None = None
    category_id: int | None = None
    linkedin: str = ""
    website: str = ""
    id: int = NEW_CONTACT_ID

    @property
    def is_new(self) -> bool:
        return self.id == NEW_CONTACT_ID


@dataclass(frozen=True)
class ContactGroupLink:
    """Membership of one contact in one group."""

    contact_id: int
    group_id: int


@dataclass(frozen=True)
class ContactWithGroups:
    """A contact together with the groups it is linked to."""

    contact: Contact
    groups: list[Group] = field(default_factory=list)
