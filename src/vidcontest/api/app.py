"""FastAPI application factory.

Builds the app with CORS, the feedback, summary and admin routers under
/api, and a per-request database session dependency bound to the app's
database URL. Tables are created on startup.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Generator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from vidcontest.core.log import configure_logging
from vidcontest.core.settings import get_settings
from vidcontest.db.repo import DbSession
from vidcontest.db.session import get_session, init_db


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session bound to the app's database.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.database_url)
    try:
        yield session
    finally:
        session.close()


def create_app(database_url: str | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        database_url: Database used for request sessions, its tables created
            at startup. Defaults to the configured URL.

    Returns:
        Configured FastAPI application.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        init_db(app.state.database_url)
        yield

    app = FastAPI(
        title="vidcontest API",
        description="Video contest judging and feedback summaries",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.database_url = database_url or settings.database_url

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    from vidcontest.api.routes import admin, feedback, summaries

    app.include_router(feedback.router, prefix="/api")
    app.include_router(summaries.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
