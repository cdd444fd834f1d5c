"""Category administration router."""

from typing import Any

from fastapi import APIRouter, Depends

from src.storefront.api.http.deps import get_category_orchestrator, get_request_context
from src.storefront.api.http.responses import view_response
from src.storefront.core.models import RequestContext
from src.storefront.core.services import CategoryOrchestrator

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("")
def index(
    context: RequestContext = Depends(get_request_context),
    orchestrator: CategoryOrchestrator = Depends(get_category_orchestrator),
) -> dict[str, Any]:
    return view_response(orchestrator.index(context))


@router.get("/new/{parent_id}")
def new_form(
    parent_id: int,
    context: RequestContext = Depends(get_request_context),
    orchestrator: CategoryOrchestrator = Depends(get_category_orchestrator),
) -> dict[str, Any]:
    """Blank category under ``parent_id``; 0 creates a root category."""
    return view_response(orchestrator.new_form(context, parent_id))


@router.get("/{category_id}/edit")
def edit_form(
    category_id: int,
    context: RequestContext = Depends(get_request_context),
    orchestrator: CategoryOrchestrator = Depends(get_category_orchestrator),
) -> dict[str, Any]:
    return view_response(orchestrator.edit_form(context, category_id))


@router.post("/update")
def update(
    context: RequestContext = Depends(get_request_context),
    orchestrator: CategoryOrchestrator = Depends(get_category_orchestrator),
) -> dict[str, Any]:
    """Create or update the category named by the ``categoryid`` form field."""
    return view_response(orchestrator.update_from_form(context))
