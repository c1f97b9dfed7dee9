"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; every error body has an "error" string

Design Decisions:
    - Thin routes delegate to services/employee_service.py
"""
