"""ORM Models - SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all runs
"""

from employee_registry.models.employee import Employee  # noqa: F401
