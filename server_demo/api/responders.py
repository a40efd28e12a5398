"""Error Responders — turn an exception into the terminal response of a chain.

Invariants:
    - Bad request: WARNING log, X-REASON = raw message, 400, QueryError JSON body
    - Internal error: ERROR log with traceback, 500, plaintext "Bewarror: <msg>\\n"
    - A QueryError that fails to serialize falls through to the internal-error path
"""

import logging

from pydantic_core import PydanticSerializationError

from server_demo.api.handler_chain import Exchange, JSON, PLAIN_TEXT, REASON_HEADER
from server_demo.core.errors import SerializationError
from server_demo.schemas.payloads import QueryError

logger = logging.getLogger(__name__)


def write_bad_request(exchange: Exchange, error: Exception) -> None:
    reason = str(error)
    logger.warning(
        reason,
        extra={
            "error_code": getattr(error, "code", None),
            "path": exchange.request.url.path,
        },
    )
    try:
        body = QueryError(reason=reason).to_json()
    except PydanticSerializationError as e:
        write_internal_server_error(exchange, SerializationError(str(e)))
        return

    exchange.set_header(REASON_HEADER, reason)
    exchange.status_code = 400
    exchange.media_type = JSON
    exchange.write(body)


def write_internal_server_error(exchange: Exchange, error: Exception) -> None:
    logger.error(
        f"Internal error: {error}",
        exc_info=error,
        extra={
            "error_code": getattr(error, "code", None),
            "path": exchange.request.url.path,
        },
    )
    exchange.status_code = 500
    exchange.media_type = PLAIN_TEXT
    exchange.write(f"Bewarror: {error}\n")
