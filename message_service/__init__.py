"""Single-endpoint service that serves a configured message over HTTP."""

__version__ = "1.0.0"
