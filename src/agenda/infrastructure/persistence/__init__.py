"""Relational persistence: schema, store handle and DAOs."""

from agenda.infrastructure.persistence.dao import SqlCategoryDao, SqlContactDao, SqlGroupDao
from agenda.infrastructure.persistence.database import (
    DEFAULT_CATEGORIES,
    DEFAULT_GROUPS,
    Database,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_GROUPS",
    "Database",
    "SqlCategoryDao",
    "SqlContactDao",
    "SqlGroupDao",
]
