"""Application factory for the message service.

Wires the configured message into a FastAPI application with a single
explicitly registered route. Use `create_application` directly, or point
uvicorn at it with `--factory`.
"""

import logging

from fastapi import FastAPI

from message_service.api.routes import message_router
from message_service.core.config import Settings, get_settings
from message_service.services.message import MessageService

logger = logging.getLogger(__name__)


def create_application(settings: Settings | None = None) -> FastAPI:
    """Assemble and configure the FastAPI application instance.

    - Falls back to the cached environment-driven `get_settings()` when no
      settings object is passed in.
    - Builds the MessageService from `application.message` and stores it on
      `app.state` for the dependency in `message_service.api.deps`.
    - Registers the message router that exposes `GET /`.
    """

    if settings is None:
        settings = get_settings()

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
    )
    application.state.message_service = MessageService(settings.APPLICATION_MESSAGE)
    application.include_router(message_router)

    logger.info("Application assembled; serving %d-character message on GET /", len(settings.APPLICATION_MESSAGE))
    return application
