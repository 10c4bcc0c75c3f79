"""Dependency providers used by FastAPI endpoints.

The MessageService is built once by the application factory and parked on
`app.state`; handlers receive it through FastAPI's dependency injection so
they never touch configuration directly.
"""

from fastapi import Request

from message_service.services.message import MessageService


def get_message_service(request: Request) -> MessageService:
    """Return the MessageService attached to the running application."""
    return request.app.state.message_service
