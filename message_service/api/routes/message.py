"""HTTP route serving the configured message."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from message_service.api import deps
from message_service.services.message import MessageService

router = APIRouter(tags=["message"])


@router.get("/", response_class=PlainTextResponse)
async def get_message(
    message_service: MessageService = Depends(deps.get_message_service),
) -> PlainTextResponse:
    """Return the configured message verbatim as the response body."""

    return PlainTextResponse(message_service.message)
