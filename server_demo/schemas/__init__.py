"""Pydantic Schemas — JSON payloads written by the route handlers.

Invariants:
    - Wire field names are declared once, as aliases on the models

Design Decisions:
    - Response-only schemas: no route accepts a body
"""
