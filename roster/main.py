"""Roster API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RosterError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The lifespan owns the single DatabaseSessionManager: created on startup,
      kept on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema created with metadata.create_all: one table, no migration tool
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.error_handlers import register_error_handlers
from roster.api.routes import health, users
from roster.config import Settings, get_settings
from roster.infrastructure.database import DatabaseSessionManager
from roster.infrastructure.observability import setup_logging
from roster.infrastructure.user_repository import SqlUserRepository
from roster.persistence.seed import seed_users

logger = logging.getLogger(__name__)


async def init_store(settings: Settings) -> DatabaseSessionManager:
    """Create the session manager, the schema, and (optionally) the demo roster."""
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await db_manager.create_schema()
    if settings.seed_demo_data:
        async with db_manager.session() as db:
            await seed_users(SqlUserRepository(db))
    return db_manager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = await init_store(settings)
    logger.info("Roster API started")
    yield
    logger.info("Roster API shutting down")
    await app.state.db_manager.dispose()
    app.state.db_manager = None


app = FastAPI(title="Roster API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
