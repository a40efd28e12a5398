"""Handler Chain — order, no short-circuit, last-write-wins.

Invariants:
    - Handlers run in the order given, each exactly once per request
    - Later header/status writes replace earlier ones; body writes append
    - Sync and async handlers mix freely in one chain
"""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from server_demo.api.handler_chain import COUNT_HEADER, chain, count_request
from server_demo.core.request_counter import ServerState


async def _get(*handlers, path="/chained/thing"):
    app = FastAPI()
    app.state.server = ServerState()
    app.add_api_route("/chained/{item}", chain(*handlers), methods=["GET"])
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        return await c.get(path), app.state.server


async def test_handlers_run_in_order():
    calls = []

    def first(ex):
        calls.append("first")

    async def second(ex):
        calls.append("second")

    def third(ex):
        calls.append("third")

    await _get(first, second, third)
    assert calls == ["first", "second", "third"]


async def test_later_header_and_status_win():
    def early(ex):
        ex.set_header("X-Test", "early")
        ex.status_code = 201

    def late(ex):
        ex.set_header("X-Test", "late")
        ex.status_code = 202

    res, _ = await _get(early, late)
    assert res.status_code == 202
    assert res.headers["X-Test"] == "late"


async def test_body_writes_append_without_short_circuit():
    def a(ex):
        ex.status_code = 400
        ex.write("a")

    def b(ex):
        ex.write("b")

    res, _ = await _get(a, b)
    assert res.status_code == 400
    assert res.text == "ab"


async def test_path_params_reach_handlers():
    seen = {}

    def grab(ex):
        seen.update(ex.params)

    await _get(grab, path="/chained/widget")
    assert seen == {"item": "widget"}


async def test_count_request_increments_once_and_sets_header():
    res, state = await _get(count_request)
    assert res.headers[COUNT_HEADER] == "1"
    assert state.request_counter.value == 1


async def test_empty_body_defaults_to_200():
    res, _ = await _get(count_request)
    assert res.status_code == 200
    assert res.text == ""
