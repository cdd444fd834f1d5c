"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from fastapi import Depends, Request
from loguru import logger
from sqlmodel import Session
from starlette.datastructures import UploadFile

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.core.models import RequestContext, UploadedFile
from src.storefront.core.services import (
    CategoryOrchestrator,
    ImageUploadService,
    OrderableService,
    ProductOrchestrator,
    SizeService,
)
from src.storefront.entities import CategoryRepository, ProductRepository
from src.storefront.runtime.context import get_config


class Principal(NamedTuple):
    name: str
    roles: frozenset[str]


def get_db_session(request: Request) -> Iterator[Session]:
    """Request-scoped session; it is also the request's unit of work."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_image_service(request: Request) -> ImageUploadService:
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.image_service


def get_size_service(request: Request) -> SizeService:
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.size_service


def get_orderable_service(request: Request) -> OrderableService:
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.orderable_service


def get_principal(request: Request) -> Principal:
    """Principal authenticated upstream and stored on ``request.state``.

    In development an unauthenticated request acts as the administrator.
    """
    name = getattr(request.state, "principal", None)
    roles = frozenset(getattr(request.state, "roles", set()))
    if name is None:
        cfg = get_config()
        if cfg.app.environment == "development":
            logger.debug("No authenticated principal, using development administrator")
            return Principal("developer", frozenset({cfg.app.admin_role}))
        return Principal("", frozenset())
    return Principal(name, roles)


async def get_request_context(
    request: Request, principal: Principal = Depends(get_principal)
) -> RequestContext:
    """Principal plus the posted form fields and uploaded files.

    Repeated form keys are joined with commas.
    """
    fields: dict[str, str] = {}
    files: list[UploadedFile] = []
    if request.method == "POST":
        form = await request.form()
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                if value.filename:
                    files.append(
                        UploadedFile(
                            filename=value.filename,
                            content=await value.read(),
                            content_type=value.content_type,
                        )
                    )
            elif key in fields:
                fields[key] = f"{fields[key]},{value}"
            else:
                fields[key] = value
        await form.close()

    return RequestContext(
        principal=principal.name, roles=principal.roles, form=fields, files=files
    )


def get_product_orchestrator(
    db: Session = Depends(get_db_session),
    image_service: ImageUploadService = Depends(get_image_service),
    size_service: SizeService = Depends(get_size_service),
    orderable_service: OrderableService = Depends(get_orderable_service),
) -> ProductOrchestrator:
    return ProductOrchestrator(
        ProductRepository(db),
        CategoryRepository(db),
        image_service,
        size_service,
        orderable_service,
        admin_role=get_config().app.admin_role,
    )


def get_category_orchestrator(
    db: Session = Depends(get_db_session),
    orderable_service: OrderableService = Depends(get_orderable_service),
) -> CategoryOrchestrator:
    return CategoryOrchestrator(
        CategoryRepository(db), orderable_service, admin_role=get_config().app.admin_role
    )
