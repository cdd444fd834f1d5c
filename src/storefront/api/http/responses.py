"""Translation of orchestrator results and errors into HTTP responses."""

from typing import Any

from fastapi import Request
from loguru import logger
from starlette.responses import JSONResponse

from src.storefront.core.errors import StorefrontError, ValidationError
from src.storefront.core.models import ViewResult


def view_response(result: ViewResult) -> dict[str, Any]:
    return {"view": result.view_name, "data": result.view_data.to_dict()}


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    content: dict[str, Any] = {"detail": exc.message}
    if isinstance(exc, ValidationError) and exc.field:
        content["field"] = exc.field

    logger.bind(status_code=exc.status_code, error_type=type(exc).__name__).warning(
        "request.rejected: {}", exc.message
    )
    return JSONResponse(status_code=exc.status_code, content=content)
