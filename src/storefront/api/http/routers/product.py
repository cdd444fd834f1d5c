"""Product administration router."""

from typing import Any

from fastapi import APIRouter, Depends

from src.storefront.api.http.deps import get_product_orchestrator, get_request_context
from src.storefront.api.http.responses import view_response
from src.storefront.core.models import RequestContext
from src.storefront.core.services import ProductOrchestrator

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/category/{category_id}")
def show_list(
    category_id: int,
    context: RequestContext = Depends(get_request_context),
    orchestrator: ProductOrchestrator = Depends(get_product_orchestrator),
) -> dict[str, Any]:
    """Products of one category."""
    return view_response(orchestrator.show_list(context, category_id))


@router.get("/new/{category_id}")
def new_form(
    category_id: int,
    context: RequestContext = Depends(get_request_context),
    orchestrator: ProductOrchestrator = Depends(get_product_orchestrator),
) -> dict[str, Any]:
    """Blank product for the edit form."""
    return view_response(orchestrator.new_form(context, category_id))


@router.post("/update")
def update(
    context: RequestContext = Depends(get_request_context),
    orchestrator: ProductOrchestrator = Depends(get_product_orchestrator),
) -> dict[str, Any]:
    """Create or update the product named by the ``productid`` form field."""
    return view_response(orchestrator.update_from_form(context))


@router.get("/{product_id}")
def show_item(
    product_id: int,
    context: RequestContext = Depends(get_request_context),
    orchestrator: ProductOrchestrator = Depends(get_product_orchestrator),
) -> dict[str, Any]:
    return view_response(orchestrator.show_item(context, product_id))


@router.get("/{product_id}/edit")
def edit_form(
    product_id: int,
    context: RequestContext = Depends(get_request_context),
    orchestrator: ProductOrchestrator = Depends(get_product_orchestrator),
) -> dict[str, Any]:
    return view_response(orchestrator.edit_form(context, product_id))


@router.post("/{product_id}/move-up")
def move_up(
    product_id: int,
    context: RequestContext = Depends(get_request_context),
    orchestrator: ProductOrchestrator = Depends(get_product_orchestrator),
) -> dict[str, Any]:
    return view_response(orchestrator.move_up(context, product_id))


@router.post("/{product_id}/move-down")
def move_down(
    product_id: int,
    context: RequestContext = Depends(get_request_context),
    orchestrator: ProductOrchestrator = Depends(get_product_orchestrator),
) -> dict[str, Any]:
    return view_response(orchestrator.move_down(context, product_id))


@router.post("/{product_id}/clear-sizes")
def clear_sizes(
    product_id: int,
    context: RequestContext = Depends(get_request_context),
    orchestrator: ProductOrchestrator = Depends(get_product_orchestrator),
) -> dict[str, Any]:
    """Deactivate every size of the product."""
    return view_response(orchestrator.clear_sizes(context, product_id))
