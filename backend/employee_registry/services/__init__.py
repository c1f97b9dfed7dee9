"""Services Layer - employee operations between the API routes and the Record Store.

Invariants:
    - Services depend on core/ protocols, never on a concrete store
    - One service method per REST operation
"""
