"""Bloglist API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BloglistError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() serves the app with uvicorn on settings.port (`bloglist-api` script)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bloglist.api.error_handlers import register_error_handlers
from bloglist.api.routes import health, login, posts, stats, users
from bloglist.config import get_settings
from bloglist.infrastructure.database import init_db
from bloglist.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_all()
    logger.info("Bloglist API started")
    yield
    await manager.dispose()
    logger.info("Bloglist API shutting down")


app = FastAPI(
    title="Bloglist API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(posts.router)
app.include_router(users.router)
app.include_router(login.router)
app.include_router(stats.router)

register_error_handlers(app)


def run() -> None:
    import uvicorn

    uvicorn.run(
        "bloglist.main:app", host="0.0.0.0", port=get_settings().port,
    )


if __name__ == "__main__":
    run()
