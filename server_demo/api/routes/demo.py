"""Demo Routes — index, greeting and query-parameter validation.

Invariants:
    - Every route runs count_request first, so X-REQUEST-COUNT is always set
    - GET /query with no parameters at all → 400 EMPTY_PARAMS
    - GET /query with parameters but a missing/blank id → 400 with the parse message
      (no dedicated "empty id" error path)
    - A repeated id is read from its first occurrence

Design Decisions:
    - Routes registered with add_api_route over decorators: each endpoint is a
      composed chain, not a single function (ADR: explicit middleware order per route)
"""

import logging

from fastapi import APIRouter
from pydantic_core import PydanticSerializationError

from server_demo.api.handler_chain import (
    COUNT_HEADER, JSON, Exchange, chain, count_request,
)
from server_demo.api.responders import write_bad_request, write_internal_server_error
from server_demo.core.errors import (
    EmptyParamsError, InvalidIdentifierError, SerializationError,
)
from server_demo.core.identifier import parse_identifier
from server_demo.schemas.payloads import Nestable

logger = logging.getLogger(__name__)
router = APIRouter(tags=["demo"])

QUERY_HANDLER_NAME = "QueryHandler"


def index(exchange: Exchange) -> None:
    logger.info("handling index")
    exchange.write("Welcome!\n")


def hello(exchange: Exchange) -> None:
    logger.info("handling hello")
    count = exchange.state.request_counter.value
    exchange.set_header(COUNT_HEADER, str(count))
    name = exchange.params.get("name", "")
    exchange.write(f"hello, {name}!\n\tYour RequestCount is: {count}\n")


def query_param_demo(exchange: Exchange) -> None:
    query = exchange.request.query_params
    logger.debug(
        f"we got {len(query)} params",
        extra={"query_params": query.multi_items()},
    )

    if len(query) == 0:
        write_bad_request(exchange, EmptyParamsError())
        return

    # first value wins when id is repeated
    ids = query.getlist("id")
    try:
        identifier = parse_identifier(ids[0] if ids else "")
    except InvalidIdentifierError as e:
        write_bad_request(exchange, e)
        return

    nestable = Nestable(
        identifier=identifier,
        name=QUERY_HANDLER_NAME,
        number=exchange.state.request_counter.value,
    )
    try:
        body = nestable.to_json()
    except PydanticSerializationError as e:
        write_internal_server_error(exchange, SerializationError(str(e)))
        return

    exchange.media_type = JSON
    exchange.write(body)


router.add_api_route("/", chain(count_request, index), methods=["GET"])
router.add_api_route("/hello/{name}", chain(count_request, hello), methods=["GET"])
router.add_api_route("/query", chain(count_request, query_param_demo), methods=["GET"])
