from dataclasses import dataclass

from src.storefront.core.services import (
    DbSessionService,
    ImageUploadService,
    OrderableService,
    SizeService,
)


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    image_service: ImageUploadService
    size_service: SizeService
    orderable_service: OrderableService
