"""Handler Chain — compose ordered handlers into a single route endpoint.

Invariants:
    - Every handler in a chain runs, in order, against the same Exchange
    - No short-circuiting: a handler writing a status or body does not stop the chain
    - Headers and status are last-write-wins; body writes append in order
    - count_request increments the counter exactly once per invocation

Design Decisions:
    - Exchange as a mutable response builder: Starlette responses are immutable once
      built, so the chain accumulates writes and renders one Response at the end
    - ServerState reaches handlers through the Exchange (request.app.state.server),
      never through module globals (ADR: dependency injection)
"""

import inspect
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Union

from fastapi import Request, Response

from server_demo.core.request_counter import ServerState

COUNT_HEADER = "X-REQUEST-COUNT"
REASON_HEADER = "X-REASON"

PLAIN_TEXT = "text/plain; charset=utf-8"
JSON = "application/json"


@dataclass
class Exchange:
    """One request and the response being built for it."""
    request: Request
    state: ServerState
    params: dict[str, str] = field(default_factory=dict)
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    media_type: str = PLAIN_TEXT
    _body: list[str] = field(default_factory=list)

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def write(self, text: str) -> None:
        self._body.append(text)

    @property
    def body(self) -> str:
        return "".join(self._body)

    def to_response(self) -> Response:
        return Response(
            content=self.body,
            status_code=self.status_code,
            headers=self.headers,
            media_type=self.media_type,
        )


Handler = Callable[[Exchange], Union[Awaitable[None], None]]


def chain(*handlers: Handler) -> Callable[[Request], Awaitable[Response]]:
    """Return one endpoint that runs every handler in sequence."""

    async def endpoint(request: Request) -> Response:
        exchange = Exchange(
            request=request,
            state=request.app.state.server,
            params=dict(request.path_params),
        )
        for handler in handlers:
            result = handler(exchange)
            if inspect.isawaitable(result):
                await result
        return exchange.to_response()

    endpoint.__name__ = "_".join(h.__name__ for h in handlers) or "empty_chain"
    return endpoint


def count_request(exchange: Exchange) -> None:
    """Increment the request counter and expose it as X-REQUEST-COUNT."""
    count = exchange.state.request_counter.increment()
    exchange.set_header(COUNT_HEADER, str(count))
