"""Declarative Base — shared metadata for the students, teachers and membership tables.

Invariants:
    - Every classroom model inherits from Base
    - Constraint and index names follow one convention, so PostgreSQL and SQLite
      schemas created by create_schema carry identical names
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
