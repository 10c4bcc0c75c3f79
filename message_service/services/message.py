"""Holder for the configured message served by the API."""


class MessageService:
    """Owns the configured message; read-only once constructed."""

    __slots__ = ("_message",)

    def __init__(self, message: str):
        if message is None:
            raise ValueError("MessageService requires a configured message.")
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"MessageService(message={self._message!r})"
