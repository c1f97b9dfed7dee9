"""Employee ORM - the single table backing the Record Store.

Invariants:
    - id is INTEGER PRIMARY KEY AUTOINCREMENT: assigned by the store, never reused after delete
    - email is UNIQUE: at most one row per email, enforced atomically by the database
    - every column is NOT NULL
    - hire_date is stored in column "hireDate" as free text (no range validation)

Design Decisions:
    - sqlite_autoincrement=True: plain INTEGER PRIMARY KEY may reuse the highest
      deleted id, AUTOINCREMENT keeps ids monotonic
    - department is free text, not a foreign key; distinct values are computed on read
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from employee_registry.db.base import Base


class Employee(Base):
    """One employee record."""
    __tablename__ = "employees"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    department: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    hire_date: Mapped[str] = mapped_column("hireDate", Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Employee id={self.id} email={self.email!r}>"
