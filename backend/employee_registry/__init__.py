"""Employee Registry - CRUD service for employee records plus its Python client.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
