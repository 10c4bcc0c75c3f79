"""Startup errors raised while assembling the service."""


class MissingConfigurationError(RuntimeError):
    """Raised when a required configuration key has no value at startup."""

    def __init__(self, keys: tuple[str, ...], env_names: tuple[str, ...] = ()):
        self.keys = keys
        self.env_names = env_names
        detail = ", ".join(keys)
        if env_names:
            detail += f" (set {', '.join(env_names)})"
        super().__init__(f"Missing required configuration key(s): {detail}")
