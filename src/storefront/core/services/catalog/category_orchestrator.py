from loguru import logger

from src.storefront.core.errors import PermissionDeniedError
from src.storefront.core.forms import (
    Binding,
    bind_form,
    parse_bool,
    parse_int,
    parse_optional_int,
    parse_str,
    read_int,
)
from src.storefront.core.models import RequestContext, ShopViewData, ViewResult
from src.storefront.core.services.orderable_service import OrderableService
from src.storefront.entities import NEW_ENTITY_ID, Category, CategoryRepository

CATEGORY_BINDINGS: dict[str, Binding] = {
    "name": ("name", parse_str),
    "parentid": ("parent_id", parse_optional_int),
    "position": ("position", parse_int),
    "isactive": ("is_active", parse_bool),
}


class CategoryOrchestrator:
    """Listing and editing workflows for the category tree."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        orderable_service: OrderableService,
        admin_role: str = "Administrator",
    ):
        self._categories = category_repository
        self._orderable = orderable_service
        self._admin_role = admin_role

    def index(self, context: RequestContext) -> ViewResult:
        self._authorize(context)
        return ViewResult("Index", ShopViewData(categories=self._categories.list_all()))

    def new_form(self, context: RequestContext, parent_id: int) -> ViewResult:
        """Blank category under ``parent_id``; 0 places it at the root."""
        self._authorize(context)
        parent = parent_id or None
        if parent is not None:
            self._categories.get_by_id(parent)
        category = Category(
            parent_id=parent,
            position=self._orderable.next_position(self._categories.list_children(parent)),
        )
        return self._edit_view(category)

    def edit_form(self, context: RequestContext, category_id: int) -> ViewResult:
        self._authorize(context)
        return self._edit_view(self._categories.get_by_id(category_id))

    def update(self, context: RequestContext, category_id: int) -> ViewResult:
        self._authorize(context)
        if category_id == NEW_ENTITY_ID:
            category = Category()
            self._categories.insert_on_submit(category)
        else:
            category = self._categories.get_by_id(category_id)

        bind_form(category, context.form, CATEGORY_BINDINGS)
        self._categories.submit_changes()
        logger.info("Category {} saved by {}", category.id, context.principal)
        return self._edit_view(category)

    def update_from_form(self, context: RequestContext) -> ViewResult:
        return self.update(context, read_int(context.form, "categoryid", NEW_ENTITY_ID))

    def _edit_view(self, category: Category) -> ViewResult:
        return ViewResult(
            "Edit", ShopViewData(category=category, categories=self._categories.list_all())
        )

    def _authorize(self, context: RequestContext) -> None:
        if not context.is_in_role(self._admin_role):
            raise PermissionDeniedError(
                f"{context.principal or 'anonymous'} is not in role {self._admin_role}"
            )
