"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - All external calls wrapped with timeout and error mapping

Design Decisions:
    - Thin async wrapper over httpx (ADR: ExMA single responsibility)
"""
