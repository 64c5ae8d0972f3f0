"""API server CLI command."""

import click

from mathpad.config import Settings


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: MATHPAD_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: MATHPAD_PORT).")
def serve(host: str | None, port: int | None):
    """Start the mathpad HTTP API."""
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(
        "mathpad.api:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )
