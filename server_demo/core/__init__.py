"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Errors, identifier parsing and the request counter live here

Design Decisions:
    - Functional core separated from the HTTP shell (ADR: impureim sandwich)
"""
