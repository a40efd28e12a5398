"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Endpoints are handler chains built by api.handler_chain.chain

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
