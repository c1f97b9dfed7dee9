"""Board Rendering - plain-text view of an EmployeeBoard.

Invariants:
    - Pure: reads board state, returns a string, performs no IO
    - Selected department marked with [brackets]; "All Departments" when none selected
"""

from employee_registry.client.board import EmployeeBoard, FormMode

TITLE = "Employee Management System"

_COLUMNS = (
    ("ID", "id"),
    ("Name", "name"),
    ("Email", "email"),
    ("Department", "department"),
    ("Role", "role"),
    ("Hire Date", "hireDate"),
)

_FORM_LABELS = (
    ("Name", "name"),
    ("Email", "email"),
    ("Department", "department"),
    ("Role", "role"),
    ("Hire Date", "hireDate"),
)


def render_filter(board: EmployeeBoard) -> str:
    options = ["All Departments", *board.departments]
    selected = board.selected_department or "All Departments"
    shown = [f"[{o}]" if o == selected else o for o in options]
    return "Filter by Department: " + " | ".join(shown)


def render_form(board: EmployeeBoard) -> list[str]:
    if not board.form.is_open:
        return []
    editing = board.form.mode is FormMode.EDITING
    lines = ["Edit Employee" if editing else "Add New Employee"]
    for label, name in _FORM_LABELS:
        lines.append(f"  {label} *: {board.form.fields.get(name, '')}")
    lines.append("  [Update] [Cancel]" if editing else "  [Create] [Cancel]")
    return lines


def render_table(board: EmployeeBoard) -> list[str]:
    heading = "Employees"
    if board.selected_department:
        heading += f" - {board.selected_department}"
    if board.loading:
        return [heading, "Loading..."]
    if not board.employees:
        return [heading, "No employees found"]

    rows = [
        [str(employee.get(key, "")) for _, key in _COLUMNS]
        for employee in board.employees
    ]
    headers = [title for title, _ in _COLUMNS]
    widths = [
        max(len(cell) for cell in column)
        for column in zip(headers, *rows)
    ]

    def fmt(cells: list[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    return [heading, fmt(headers), fmt(["-" * w for w in widths])] + [
        fmt(row) for row in rows
    ]


def render_board(board: EmployeeBoard) -> str:
    lines = [TITLE]
    if board.error:
        lines.append(f"Error: {board.error}")
    lines.append(render_filter(board))
    lines.extend(render_form(board))
    lines.extend(render_table(board))
    return "\n".join(lines)
