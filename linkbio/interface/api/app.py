"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from linkbio.config import Settings
from linkbio.interface.api.error_handlers import register_exception_handlers
from linkbio.interface.api.routes import circles, connections, health, users
from linkbio.util.di.container import create_container, setup_di
from linkbio.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; a production container is built
            when omitted (tests pass one with mock components)
    """
    settings = Settings()

    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await container.close()

    app_instance = FastAPI(
        title="Linkbio API",
        description="Backend API for Linkbio - link-in-bio profiles with connections and circles",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)
    register_exception_handlers(app_instance)

    # Uploaded profile images; the directory may not exist until first upload
    app_instance.mount(
        settings.storage.uploads_url,
        StaticFiles(directory=settings.storage.uploads_dir, check_dir=False),
        name="uploads",
    )

    # Order matters: /users/email/{email} must win over /users/{user_id}/...
    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(connections.router)
    app_instance.include_router(circles.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
