"""server-demo — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Each app owns one ServerState (fresh request counter) on app.state.server
    - Startup aborts if identifier generation is unusable
    - A listener that cannot start terminates the process with a non-zero status

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - create_app() factory: tests build a fresh app (and counter) per test
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from server_demo.api.error_handlers import register_error_handlers
from server_demo.api.routes import demo
from server_demo.config import get_settings
from server_demo.core.identifier import verify_identifier_generation
from server_demo.core.request_counter import ServerState
from server_demo.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    identifier = verify_identifier_generation()
    logger.debug(f"identifier generation ok: {identifier}")
    logger.debug(f"{settings.service_name} service initiated")
    yield
    logger.info(f"{settings.service_name} shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.service_name, version="1.0.0", lifespan=lifespan)
    app.state.server = ServerState()
    app.include_router(demo.router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve on the configured port until interrupted."""
    settings = get_settings()
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    except OSError as e:
        logger.critical(f"listener failed on {settings.host}:{settings.port}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
