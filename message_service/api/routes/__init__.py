from message_service.api.routes.message import router as message_router

__all__ = ["message_router"]
