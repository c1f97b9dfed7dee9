"""Pydantic Schemas - request/response models for the REST API.

Invariants:
    - Schemas validate shape at the system boundary; business rules live in core/
    - Wire names are camelCase (hireDate), Python attributes snake_case (hire_date)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
