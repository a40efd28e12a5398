"""server-demo — three-route HTTP demo with a shared request counter.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
