"""Error Handlers — global exception handlers for errors escaping a handler chain.

Invariants:
    - ServerDemoError (400-level) → QueryError JSON + X-REASON, same shape as write_bad_request
    - ServerDemoError (500-level) → plaintext "Bewarror: <message>"
    - Exception (catch-all) → plaintext 500, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (ServerDemoError), catch-all (Exception)
    - Route handlers answer their own errors via api.responders; these handlers only
      cover errors raised outside that path
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse, Response

from server_demo.api.handler_chain import JSON, REASON_HEADER
from server_demo.core.errors import ServerDemoError
from server_demo.schemas.payloads import QueryError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ServerDemoError)
    async def domain_error_handler(request: Request, exc: ServerDemoError):
        """Handle all server-demo domain errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.is_client_error:
            logger.warning(exc.message, extra=extra)
            return Response(
                content=QueryError(reason=exc.message).to_json(),
                status_code=exc.http_status,
                headers={REASON_HEADER: exc.message},
                media_type=JSON,
            )
        logger.error(f"ServerDemoError: {exc.message}", extra=extra)
        return PlainTextResponse(
            f"Bewarror: {exc.message}\n", status_code=exc.http_status,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            "Bewarror: internal server error\n",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
