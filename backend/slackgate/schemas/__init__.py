"""Pydantic Schemas — request/response validation for the tool protocol.

Invariants:
    - Schemas validate at system boundary (tool calls in, tool results out)

Design Decisions:
    - Tool payloads stay untyped JSON inside the text item: only the envelope is modeled
"""
