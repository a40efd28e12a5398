"""API Layer — handler chains, routes, responders and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Client errors render as QueryError JSON; server errors as plain text
"""
