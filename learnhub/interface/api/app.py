"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learnhub.config import Settings
from learnhub.interface.api.routes import comments, health, notifications, posts, users
from learnhub.interface.error import register_error_handlers
from learnhub.util.di.container import create_container, setup_di
from learnhub.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    posts.router,
    comments.router,
    users.router,
    notifications.router,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API application.

    Logfire must already be configured; ``scripts/start_app.py`` does it in
    production. Tests pass a container with in-memory persistence.

    Args:
        container: DI container to use; the production container if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="LearnHub API",
        description="Class posts, threaded discussions and notifications",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)

    # The web client sends the auth_token cookie, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Uvicorn entry point; start_app.py configures logfire before importing it
app = create_app()
