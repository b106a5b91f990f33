"""Core Layer — pure domain logic, no IO, no async, no network.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic (input payloads are never mutated)

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
    - json_tree.amap_tree is the one async helper here: it awaits a caller-supplied
      visitor but performs no IO of its own
"""
