"""Evaluation API endpoints."""

import logging
from typing import Any, Callable

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from mathpad.config import Settings
from mathpad.evaluator import CONSTANTS, FUNCTIONS, evaluate_math_expression

logger = logging.getLogger(__name__)


class EvaluateRequest(BaseModel):
    """Request body for a single evaluation."""
    expression: str


class BatchEvaluateRequest(BaseModel):
    """Request body for evaluating several expressions at once."""
    expressions: list[str]


def _check_length(expression: str, settings: Settings) -> None:
    if len(expression) > settings.max_expression_length:
        logger.warning(
            "Rejected expression of length %d (limit %d)",
            len(expression),
            settings.max_expression_length,
        )
        raise HTTPException(
            status_code=422,
            detail=(
                f"Expression exceeds maximum length of "
                f"{settings.max_expression_length} characters"
            ),
        )


def create_evaluator_router(get_settings: Callable[[], Settings]) -> APIRouter:
    """Create the router for evaluation and function catalog endpoints.

    Args:
        get_settings: Returns the active settings (limits are read per request)
    """
    router = APIRouter(prefix="/api", tags=["evaluator"])

    @router.post("/evaluate")
    async def evaluate(request: EvaluateRequest) -> dict[str, Any]:
        """Evaluate one expression. Evaluation failures are reported in the body."""
        _check_length(request.expression, get_settings())
        result = evaluate_math_expression(request.expression)
        return {"data": result.to_dict()}

    @router.post("/evaluate/batch")
    async def evaluate_batch(request: BatchEvaluateRequest) -> dict[str, Any]:
        """Evaluate several expressions independently, preserving order."""
        settings = get_settings()
        if len(request.expressions) > settings.max_batch_size:
            logger.warning(
                "Rejected batch of %d expressions (limit %d)",
                len(request.expressions),
                settings.max_batch_size,
            )
            raise HTTPException(
                status_code=422,
                detail=f"Batch exceeds maximum size of {settings.max_batch_size} expressions",
            )
        for expression in request.expressions:
            _check_length(expression, settings)

        return {
            "data": [
                evaluate_math_expression(expression).to_dict()
                for expression in request.expressions
            ]
        }

    @router.get("/functions")
    async def list_functions() -> dict[str, Any]:
        """Function catalog for editor autocomplete and help."""
        documentation = FUNCTIONS.export_documentation()
        documentation["constants"] = sorted(CONSTANTS)
        return {"data": documentation}

    @router.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return router
