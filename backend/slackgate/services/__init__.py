"""Services Layer — tool handlers, identity resolution, enrichment, and tool dispatch.

Invariants:
    - Handlers split by Slack surface (channels, users, search)
    - Tool dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - One handler file per surface for locality (ADR: ExMA no god objects)
"""
