"""Employee Board - client application state for the list, department filter, and form.

Invariants:
    - Form is a state machine: IDLE → CREATING | EDITING(id) → IDLE (submit succeeded or cancelled)
    - Every successful create/update/delete re-fetches the employee list (active filter kept)
      and the department list
    - Delete asks confirm() first; a declined prompt sends no request
    - A failed action sets `error` and leaves the list and the open form untouched

Design Decisions:
    - confirm injected as a callable: a terminal prompt, a dialog, or a stub in tests
    - Department fetch failures are logged only; the filter keeps its previous options
    - A failed list fetch always shows LIST_FAILED; the server's own message only goes to the log
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from employee_registry.client.api_client import (
    ApiClientError, EmployeeApiClient, EmployeeRecord,
)
from employee_registry.core.domain_types import REQUIRED_FIELDS

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this employee?"
LIST_FAILED = "Failed to load employees: Failed to fetch employees"


class FormMode(str, Enum):
    """Which form, if any, is on screen."""
    IDLE = "idle"
    CREATING = "creating"
    EDITING = "editing"


def _blank_fields() -> dict[str, str]:
    return {name: "" for name in REQUIRED_FIELDS}


@dataclass
class FormState:
    """Form mode, the id under edit, and the current input values."""
    mode: FormMode = FormMode.IDLE
    editing_id: int | None = None
    fields: dict[str, str] = field(default_factory=_blank_fields)

    @property
    def is_open(self) -> bool:
        return self.mode is not FormMode.IDLE


class EmployeeBoard:
    """Holds what the user sees and turns user actions into API calls."""

    def __init__(
        self, api: EmployeeApiClient, confirm: Callable[[str], bool],
    ):
        self.api = api
        self.confirm = confirm
        self.employees: list[EmployeeRecord] = []
        self.departments: list[str] = []
        self.selected_department = ""
        self.form = FormState()
        self.error = ""
        self.loading = False

    # ─── Fetching ────────────────────────────────────────────────

    async def load(self) -> None:
        await self.refresh_employees()
        await self.refresh_departments()

    async def refresh_employees(self) -> None:
        self.loading = True
        try:
            self.employees = await self.api.list_employees(
                self.selected_department or None,
            )
            self.error = ""
        except ApiClientError as e:
            logger.warning(f"Employee list fetch failed: {e.message}")
            self.error = LIST_FAILED
        finally:
            self.loading = False

    async def refresh_departments(self) -> None:
        try:
            self.departments = await self.api.list_departments()
        except ApiClientError as e:
            logger.error(f"Failed to load departments: {e.message}")

    async def filter_by_department(self, department: str) -> None:
        """Select a department ("" for all) and re-fetch the list."""
        self.selected_department = department
        await self.refresh_employees()

    # ─── Form transitions ────────────────────────────────────────

    def open_create_form(self) -> None:
        if self.form.mode is not FormMode.CREATING:
            self.form = FormState(mode=FormMode.CREATING)

    def open_edit_form(self, employee: EmployeeRecord) -> None:
        self.form = FormState(
            mode=FormMode.EDITING,
            editing_id=employee["id"],
            fields={name: str(employee.get(name, "")) for name in REQUIRED_FIELDS},
        )

    def set_field(self, name: str, value: str) -> None:
        if name not in REQUIRED_FIELDS:
            raise ValueError(f"Unknown employee field: {name}")
        if not self.form.is_open:
            raise RuntimeError("No employee form is open")
        self.form.fields[name] = value

    def cancel_form(self) -> None:
        self.form = FormState()
        self.error = ""

    async def submit_form(self) -> bool:
        """Create or update from the form. Returns True on success."""
        if not self.form.is_open:
            raise RuntimeError("No employee form is open")
        self.error = ""
        fields = dict(self.form.fields)
        try:
            if self.form.mode is FormMode.EDITING:
                await self.api.update_employee(self.form.editing_id, fields)
            else:
                await self.api.create_employee(fields)
        except ApiClientError as e:
            self.error = e.message
            return False

        self.form = FormState()
        await self._refresh_after_write()
        return True

    # ─── Delete ──────────────────────────────────────────────────

    async def delete_employee(self, employee_id: int) -> bool:
        """Delete after confirmation. Returns True if the employee was deleted."""
        if not self.confirm(DELETE_PROMPT):
            return False
        try:
            await self.api.delete_employee(employee_id)
        except ApiClientError as e:
            self.error = e.message
            return False
        await self._refresh_after_write()
        return True

    async def _refresh_after_write(self) -> None:
        await self.refresh_employees()
        await self.refresh_departments()
