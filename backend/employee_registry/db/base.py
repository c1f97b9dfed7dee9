"""SQLAlchemy Declarative Base - shared base class for the ORM models.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single source of truth for the schema created on startup
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for employee-registry ORM models."""
    pass
