"""Employee Schemas - request and response bodies for /api/employees.

Invariants:
    - EmployeeFields accepts missing/null fields so presence is reported by
      enforce_employee with the full required-field list, not a per-field pydantic error
    - Non-string field values are rejected by pydantic (400 via the validation handler)
    - Unknown body keys (including a client-sent id) are ignored
    - EmployeeResponse serializes hire_date as hireDate
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmployeeFields(BaseModel):
    """Create/update body - all five mutable fields, none yet validated."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    email: str | None = None
    department: str | None = None
    role: str | None = None
    hire_date: str | None = None


class EmployeeResponse(BaseModel):
    """Public employee record including the store-assigned id."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    name: str
    email: str
    department: str
    role: str
    hire_date: str


class MessageResponse(BaseModel):
    message: str
