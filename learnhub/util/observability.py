"""Logfire setup for the API process.

Services log through ``logfire`` directly::

    with logfire.span("comment_service.create_comment", post_id=str(post_id)):
        ...
        logfire.info("Comment created", comment_id=str(comment.id), depth=depth)

This module only configures the SDK and instruments FastAPI and SQLAlchemy.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from learnhub.config import Settings

SERVICE_NAME = "learnhub-api"
SERVICE_VERSION = "0.1.0"

# Path parameters copied onto request spans, so traces can be searched by them
TRACED_PATH_PARAMS = ("post_id", "comment_id", "notification_id", "username")


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit ``send_to_logfire`` wins; otherwise send only with a token."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Console output is always on; spans go to the cloud as decided by
    ``should_send_to_logfire``.
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=f"{SERVICE_VERSION}+{settings.git_sha}",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict) -> dict:
    traced = {
        name: value
        for name, value in getattr(request, "path_params", {}).items()
        if name in TRACED_PATH_PARAMS
    }
    return {**attributes, **traced}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, tagged with the ids in its path.

    Headers are never captured: requests carry the ``auth_token`` cookie.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
