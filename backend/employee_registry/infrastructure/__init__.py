"""Infrastructure Layer - persistence, middleware, and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - Driver exceptions never leave this layer untranslated
"""
