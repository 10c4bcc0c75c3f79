"""Command-line launcher: load configuration, then serve the API with uvicorn."""

import argparse
import logging
import sys
from typing import get_args

import uvicorn
from pydantic import ValidationError
from uvicorn.config import LOG_LEVELS

from message_service.core.config import LogLevel, Settings, load_settings
from message_service.core.errors import MissingConfigurationError
from message_service.main import create_application

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("message_service")


def build_parser() -> argparse.ArgumentParser:
    """CLI flags; anything left unset falls back to the loaded settings."""
    parser = argparse.ArgumentParser(
        prog="message-service",
        description="Serve the configured application.message on GET /.",
    )
    parser.add_argument("--host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: PORT or 8080)")
    parser.add_argument("--env-file", default=".env", help="Path to a .env file (default: .env)")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.lower,
        choices=get_args(LogLevel),
        help="Logging level (default: LOG_LEVEL or info)",
    )
    return parser


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=LOG_LEVELS[level], format=LOG_FORMAT)


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Load settings, letting explicit CLI flags win over env values."""
    overrides = {
        name: value
        for name, value in (("HOST", args.host), ("PORT", args.port), ("LOG_LEVEL", args.log_level))
        if value is not None
    }
    return load_settings(env_file=args.env_file, **overrides)


def main(argv: list[str] | None = None) -> int:
    """Primary orchestrator: returns a process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = resolve_settings(args)
    except MissingConfigurationError as exc:
        configure_logging(args.log_level or "info")
        logger.error("Startup aborted: %s", exc)
        return 1
    except ValidationError as exc:
        configure_logging(args.log_level or "info")
        logger.error("Startup aborted: invalid configuration\n%s", exc)
        return 1

    configure_logging(settings.LOG_LEVEL)
    application = create_application(settings)

    logger.info("Starting API server on http://%s:%d (Ctrl+C to stop)", settings.HOST, settings.PORT)
    uvicorn.run(
        application,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


def run() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nShutting down.")
        sys.exit(0)


if __name__ == "__main__":
    run()
