"""FastAPI application setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.api.http.responses import storefront_error_handler
from src.storefront.api.http.routers.category import router as category_router
from src.storefront.api.http.routers.health import router as health_router
from src.storefront.api.http.routers.product import router as product_router
from src.storefront.api.utils.app_startup import configure_logging
from src.storefront.core.errors import StorefrontError
from src.storefront.core.services import (
    DbManageService,
    DbSessionService,
    ImageUploadService,
    OrderableService,
    SizeService,
)
from src.storefront.runtime.context import get_config

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    startup(app)
    try:
        yield
    finally:
        shutdown(app)


app = FastAPI(
    title="Storefront",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

__all__ = ["app", "build_dependencies", "startup", "shutdown"]

# --- CORS configuration ---
if get_config().app.environment == "production" and "*" in get_config().app.cors.origins:
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().app.cors.origins,
    allow_credentials=get_config().app.cors.allow_credentials,
    allow_methods=get_config().app.cors.allow_methods,
    allow_headers=get_config().app.cors.allow_headers,
)

app.add_exception_handler(StorefrontError, storefront_error_handler)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
            logger.bind(
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 1),
            ).info("request.end")
            response.headers.setdefault("X-Request-ID", request_id)
            return response
        except Exception as exc:
            logger.bind(
                status_code=500,
                duration_ms=round((time.perf_counter() - start) * 1000, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Router registration ---
app.include_router(health_router)
app.include_router(product_router)
app.include_router(category_router)


def build_dependencies() -> ApplicationDependencies:
    return ApplicationDependencies(
        database_service=DbSessionService(),
        image_service=ImageUploadService(),
        size_service=SizeService(),
        orderable_service=OrderableService(),
    )


# --- Lifecycle hooks ---
def startup(app: FastAPI) -> None:
    config = get_config()
    logger.info("Starting up storefront in {} environment", config.app.environment)

    deps = build_dependencies()
    if config.database.create_tables_on_startup:
        DbManageService(deps.database_service.engine).create_all()
    app.state.app_dependencies = deps


def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down storefront")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    app_dependencies.database_service.engine.dispose()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,
    )
