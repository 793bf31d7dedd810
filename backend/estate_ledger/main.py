"""Estate Ledger API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LedgerError values → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Each app owns exactly one LedgerState, reached through app.state.dispatch

Design Decisions:
    - create_app() factory: tests build an app around a fresh LedgerState
      (ADR: no ambient global ledger)
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - State is in-memory only: durability across restarts is out of scope
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from estate_ledger.api.error_handlers import register_error_handlers
from estate_ledger.api.routes import health, properties, users
from estate_ledger.config import get_settings
from estate_ledger.core.ledger_state import LedgerState
from estate_ledger.infrastructure.observability import setup_logging
from estate_ledger.services.ledger_dispatch import LedgerDispatch

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Estate Ledger API started")
    yield
    logger.info("Estate Ledger API shutting down")


def create_app(state: LedgerState | None = None) -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Estate Ledger API", version="1.0.0", lifespan=lifespan,
    )
    app.state.dispatch = LedgerDispatch(
        state or LedgerState(), max_page_size=settings.max_page_size,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(properties.router)

    register_error_handlers(app)
    return app


app = create_app()
