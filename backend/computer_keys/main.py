"""Computer and Keys API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the JSON error envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - authorized_keys router included before computers so a server literally named
      "computers" still reaches its keys
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from computer_keys.api.error_handlers import register_error_handlers
from computer_keys.api.middleware import register_middleware
from computer_keys.api.routes import authorized_keys, computers, health
from computer_keys.config import get_settings
from computer_keys.infrastructure.database import init_db
from computer_keys.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.sqlalchemy_url(),
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    logger.info("Computer and Keys API started")
    yield
    logger.info("Computer and Keys API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Computer and Keys API Documentation",
    version="1.0",
    description="REST Service for Computers and Keys",
    openapi_tags=[
        {"name": "Computers", "description": "Computer catalog keyed by maker and model"},
        {"name": "SSH Keys", "description": "Authorized SSH public keys per server"},
    ],
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(authorized_keys.router)
app.include_router(computers.router)

register_error_handlers(app)
register_middleware(app, settings.request_timeout_seconds)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "computer_keys.main:app",
        host=settings.server_host,
        port=settings.server_port,
    )
