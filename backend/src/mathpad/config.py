"""Runtime configuration and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass
class Settings:
    """Service settings.

    Attributes:
        log_level: Root logging level name
        host: Interface the API binds to
        port: Port the API listens on
        cors_origins: Origins allowed to call the API from a browser
        max_expression_length: Longest expression accepted over HTTP
        max_batch_size: Most expressions accepted in one batch request
    """

    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:3000"])
    max_expression_length: int = 1000
    max_batch_size: int = 100

    @classmethod
    def from_env(cls) -> Settings:
        """Create settings from environment variables.

        Recognized variables:
        - MATHPAD_LOG_LEVEL
        - MATHPAD_HOST, MATHPAD_PORT
        - MATHPAD_CORS_ORIGINS (comma separated)
        - MATHPAD_MAX_EXPRESSION_LENGTH, MATHPAD_MAX_BATCH_SIZE

        Raises:
            ValueError: If a numeric variable is not an integer
        """
        defaults = cls()

        origins = os.environ.get("MATHPAD_CORS_ORIGINS")
        if origins is not None:
            cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            cors_origins = defaults.cors_origins

        return cls(
            log_level=os.environ.get("MATHPAD_LOG_LEVEL", defaults.log_level).upper(),
            host=os.environ.get("MATHPAD_HOST", defaults.host),
            port=_int_from_env("MATHPAD_PORT", defaults.port),
            cors_origins=cors_origins,
            max_expression_length=_int_from_env(
                "MATHPAD_MAX_EXPRESSION_LENGTH", defaults.max_expression_length
            ),
            max_batch_size=_int_from_env("MATHPAD_MAX_BATCH_SIZE", defaults.max_batch_size),
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level.upper())
