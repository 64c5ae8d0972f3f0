"""HTTP API for the mathpad evaluator."""

from mathpad.api.app import app, create_app
from mathpad.api.endpoints import create_evaluator_router

__all__ = ["app", "create_app", "create_evaluator_router"]
