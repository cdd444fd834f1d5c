from loguru import logger

from src.storefront.core.errors import PermissionDeniedError, StorefrontError
from src.storefront.core.forms import (
    Binding,
    bind_form,
    parse_bool,
    parse_decimal,
    parse_int,
    parse_str,
    read_int,
)
from src.storefront.core.models import RequestContext, ShopViewData, ViewResult
from src.storefront.core.services.image_service import ImageUploadService
from src.storefront.core.services.orderable_service import MoveDirection, OrderableService
from src.storefront.core.services.size_service import SizeService
from src.storefront.entities import NEW_ENTITY_ID, CategoryRepository, Product, ProductRepository
from src.storefront.entities.catalog.product import url_name_for

PRODUCT_BINDINGS: dict[str, Binding] = {
    "categoryid": ("category_id", parse_int),
    "name": ("name", parse_str),
    "description": ("description", parse_str),
    "price": ("price", parse_decimal),
    "weight": ("weight", parse_int),
    "position": ("position", parse_int),
    "isactive": ("is_active", parse_bool),
    "urlname": ("url_name", parse_str),
}


class ProductOrchestrator:
    """Listing and editing workflows for products.

    Every operation requires the administrator role and returns the view to
    render together with its data.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        image_service: ImageUploadService,
        size_service: SizeService,
        orderable_service: OrderableService,
        admin_role: str = "Administrator",
    ):
        self._products = product_repository
        self._categories = category_repository
        self._images = image_service
        self._sizes = size_service
        self._orderable = orderable_service
        self._admin_role = admin_role

    def show_list(self, context: RequestContext, category_id: int) -> ViewResult:
        self._authorize(context)
        category = self._categories.get_by_id(category_id)
        return ViewResult(
            "Index", ShopViewData(category=category, products=category.products)
        )

    def show_item(self, context: RequestContext, product_id: int) -> ViewResult:
        self._authorize(context)
        product = self._products.get_by_id(product_id)
        return ViewResult("Item", ShopViewData(product=product))

    def new_form(self, context: RequestContext, category_id: int) -> ViewResult:
        self._authorize(context)
        category = self._categories.get_by_id(category_id)
        product = Product(
            category_id=category_id,
            position=self._orderable.next_position(category.products),
        )
        return self._edit_view(product)

    def edit_form(self, context: RequestContext, product_id: int) -> ViewResult:
        self._authorize(context)
        return self._edit_view(self._products.get_by_id(product_id))

    def update(self, context: RequestContext, product_id: int) -> ViewResult:
        """Create (``product_id`` 0) or update a product from the posted form.

        Form fields are bound, uploaded images appended to the gallery and
        sizes applied before the unit of work is committed once.
        """
        self._authorize(context)
        if product_id == NEW_ENTITY_ID:
            product = Product()
            self._products.insert_on_submit(product)
        else:
            product = self._products.get_by_id(product_id)

        bound = bind_form(product, context.form, PRODUCT_BINDINGS)
        if "name" in bound and "url_name" not in bound:
            product.url_name = url_name_for(product.name)

        images = self._images.get_uploaded_images(context)
        for image in images:
            product.add_image(image)

        try:
            self._sizes.apply(context.form, product)
            self._products.submit_changes()
        except StorefrontError:
            self._images.discard(images)
            raise

        logger.info(
            "Product {} saved by {}",
            product.id,
            context.principal,
            created=product_id == NEW_ENTITY_ID,
            fields=sorted(bound),
        )
        return self._edit_view(product)

    def update_from_form(self, context: RequestContext) -> ViewResult:
        """``update`` for the product named by the form's ``productid`` field."""
        return self.update(context, read_int(context.form, "productid", NEW_ENTITY_ID))

    def move_up(self, context: RequestContext, product_id: int) -> ViewResult:
        return self._move(context, product_id, MoveDirection.UP)

    def move_down(self, context: RequestContext, product_id: int) -> ViewResult:
        return self._move(context, product_id, MoveDirection.DOWN)

    def clear_sizes(self, context: RequestContext, product_id: int) -> ViewResult:
        self._authorize(context)
        product = self._products.get_by_id(product_id)
        self._sizes.clear(product)
        self._products.submit_changes()
        return self._edit_view(product)

    def _move(
        self, context: RequestContext, product_id: int, direction: MoveDirection
    ) -> ViewResult:
        self._authorize(context)
        product = self._products.get_by_id(product_id)
        siblings = self._products.list_by_category(product.category_id)
        if self._orderable.move(siblings, product, direction):
            self._products.submit_changes()
            logger.debug("Moved product {} {}", product.id, direction.value)

        category = self._categories.get_by_id(product.category_id)
        return ViewResult(
            "Index",
            ShopViewData(
                category=category,
                products=sorted(siblings, key=lambda p: (p.position, p.id)),
            ),
        )

    def _edit_view(self, product: Product) -> ViewResult:
        return ViewResult(
            "Edit", ShopViewData(product=product, categories=self._categories.list_all())
        )

    def _authorize(self, context: RequestContext) -> None:
        if not context.is_in_role(self._admin_role):
            raise PermissionDeniedError(
                f"{context.principal or 'anonymous'} is not in role {self._admin_role}"
            )
