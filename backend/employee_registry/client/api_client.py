"""Employee API Client - async httpx wrapper over the /api endpoints.

Invariants:
    - One method per REST operation; each is a single request, no retries
    - Non-2xx responses raise ApiClientError with the server's "error" string when present
    - Transport failures raise ApiClientError with the operation's fallback message

Design Decisions:
    - httpx.AsyncClient injected: tests drive the real app through ASGITransport
    - Records returned as plain dicts keyed by wire names (hireDate)
"""

from typing import Any

import httpx

DEFAULT_API_URL = "http://localhost:5000/api"

EmployeeRecord = dict[str, Any]


class ApiClientError(Exception):
    """A request to the employee API failed."""

    def __init__(
        self, message: str, status_code: int | None = None, body: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class EmployeeApiClient:
    """Typed access to the employee REST API."""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    @classmethod
    def connect(
        cls, base_url: str = DEFAULT_API_URL, **kwargs: Any,
    ) -> "EmployeeApiClient":
        return cls(httpx.AsyncClient(base_url=base_url, **kwargs))

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "EmployeeApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(
        self, method: str, path: str, fallback: str, **kwargs: Any,
    ) -> Any:
        try:
            response = await self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise ApiClientError(f"{fallback}: {e}") from e

        data = _json_or_none(response)
        if response.is_error:
            message = data.get("error") if isinstance(data, dict) else None
            raise ApiClientError(
                message or fallback, response.status_code, data,
            )
        return data

    async def list_employees(
        self, department: str | None = None,
    ) -> list[EmployeeRecord]:
        params = {"department": department} if department else None
        return await self._request(
            "GET", "employees", "Failed to fetch employees", params=params,
        )

    async def get_employee(self, employee_id: int) -> EmployeeRecord:
        return await self._request(
            "GET", f"employees/{employee_id}", "Failed to fetch employee",
        )

    async def create_employee(self, fields: dict[str, str]) -> EmployeeRecord:
        return await self._request(
            "POST", "employees", "Failed to save employee", json=fields,
        )

    async def update_employee(
        self, employee_id: int, fields: dict[str, str],
    ) -> EmployeeRecord:
        return await self._request(
            "PUT", f"employees/{employee_id}", "Failed to save employee",
            json=fields,
        )

    async def delete_employee(self, employee_id: int) -> str:
        data = await self._request(
            "DELETE", f"employees/{employee_id}", "Failed to delete employee",
        )
        return data["message"]

    async def list_departments(self) -> list[str]:
        return await self._request(
            "GET", "departments", "Failed to fetch departments",
        )
