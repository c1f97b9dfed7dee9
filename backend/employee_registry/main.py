"""Employee Registry API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeRegistryError → {"error": ...} JSON responses
    - CORS and rate limiting configured from settings (not hardcoded)
    - Database initialized and schema created on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: one place for startup and shutdown
    - Rate limiter added before CORS so 429 responses still carry CORS headers
    - Rate counter exposed on app.state for inspection and reset
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_registry.api.error_handlers import register_error_handlers
from employee_registry.api.routes import departments, employees, health
from employee_registry.config import get_settings
from employee_registry.core.rate_window import FixedWindowCounter
from employee_registry.infrastructure.database import close_db, init_db
from employee_registry.infrastructure.observability import setup_logging
from employee_registry.infrastructure.rate_limit import RateLimitMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.database_url)
    await manager.create_schema()
    logger.info("Employee Registry API started")
    yield
    await close_db()
    logger.info("Employee Registry API shutting down")


app = FastAPI(
    title="Employee Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()

rate_counter = FixedWindowCounter(
    settings.rate_limit_max_requests, settings.rate_limit_window_seconds,
)
app.state.rate_counter = rate_counter
app.add_middleware(
    RateLimitMiddleware,
    counter=rate_counter,
    enabled=settings.rate_limit_enabled,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes - explicit registration
app.include_router(health.router)
app.include_router(employees.router)
app.include_router(departments.router)

register_error_handlers(app)
