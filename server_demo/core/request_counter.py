"""Request Counter — process-wide tally of handled requests.

Invariants:
    - Starts at 0, never reset, never decreases
    - increment() is atomic: concurrent callers never lose an update
    - Owned by ServerState (app.state), never a module-level global

Design Decisions:
    - threading.Lock over bare int: sync handlers may run in the threadpool
      alongside the event loop (ADR: correctness over fidelity to the racy original)
"""

import threading
from dataclasses import dataclass, field


class RequestCounter:
    """Thread-safe monotonically increasing counter."""

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


@dataclass
class ServerState:
    """Shared state injected into every handler chain."""
    request_counter: RequestCounter = field(default_factory=RequestCounter)
