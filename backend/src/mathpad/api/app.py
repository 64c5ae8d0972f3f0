"""FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mathpad.api.endpoints import create_evaluator_router
from mathpad.config import Settings, configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application.

    Args:
        settings: Settings to use; read from the environment when omitted
    """
    if settings is None:
        settings = Settings.from_env()

    configure_logging(settings.log_level)
    logger.info(
        "Starting mathpad API (cors_origins=%s, max_expression_length=%d, max_batch_size=%d)",
        settings.cors_origins,
        settings.max_expression_length,
        settings.max_batch_size,
    )

    app = FastAPI(title="mathpad API")

    # CORS for the notebook front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_evaluator_router(get_settings=lambda: settings))
    return app


app = create_app()
