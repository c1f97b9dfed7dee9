"""Health Routes - process liveness and record-store readiness.

Invariants:
    - GET /api/health answers 200 without touching the store
    - GET /api/health/ready runs one SELECT 1 against the store; 503 when it fails
    - Both bypass EmployeeService: no employee data is read
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import employee_registry.infrastructure.database as database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
async def health_check():
    return {"status": "healthy", "service": "employee-registry"}


@router.get("/ready")
async def readiness_check():
    """200 once the SQLite file opens and answers; 503 before init_db or after close_db."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
