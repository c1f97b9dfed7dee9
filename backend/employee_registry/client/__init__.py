"""Client Layer - Python client for the employee REST API and the list/filter/form board.

Invariants:
    - Client holds UI state only; every rule is enforced by the API
    - Talks to the service exclusively over HTTP (never imports services/ or infrastructure/)
"""
