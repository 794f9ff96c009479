"""Domain layer: entities and value objects. No dependencies on outer layers."""

from agenda.domain.entities import (
    NEW_CONTACT_ID,
    Category,
    Contact,
    ContactGroupLink,
    ContactWithGroups,
    Group,
)

__all__ = [
    "NEW_CONTACT_ID",
    "Category",
    "Contact",
    "ContactGroupLink",
    "ContactWithGroups",
    "Group",
]
