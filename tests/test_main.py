"""App factory & lifespan — fresh state per app, startup self-test.

Invariants:
    - create_app() gives each app its own counter
    - Lifespan aborts startup when identifier generation is unusable
"""

import logging
import uuid

import pytest

from server_demo import main
from server_demo.core.errors import IdentifierGenerationError
from server_demo.infrastructure import observability


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    if observability._installed_handler is not None:
        logging.root.removeHandler(observability._installed_handler)
        observability._installed_handler = None


def test_each_app_has_its_own_counter():
    a, b = main.create_app(), main.create_app()
    a.state.server.request_counter.increment()
    assert b.state.server.request_counter.value == 0


async def test_lifespan_runs_self_test(monkeypatch):
    calls = []

    def fake_verify():
        calls.append(True)
        return uuid.uuid4()

    monkeypatch.setattr(main, "verify_identifier_generation", fake_verify)
    app = main.create_app()
    async with main.lifespan(app):
        pass
    assert calls == [True]


async def test_lifespan_aborts_when_generation_fails(monkeypatch):
    def broken():
        raise IdentifierGenerationError("no entropy")

    monkeypatch.setattr(main, "verify_identifier_generation", broken)
    app = main.create_app()
    with pytest.raises(IdentifierGenerationError):
        async with main.lifespan(app):
            pass


def test_run_exits_when_listener_fails(monkeypatch):
    def refuse(*args, **kwargs):
        raise OSError("address already in use")

    monkeypatch.setattr(main.uvicorn, "run", refuse)
    with pytest.raises(SystemExit) as exc:
        main.run()
    assert exc.value.code == 1
