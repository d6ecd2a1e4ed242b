# inventory_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_api.core.config import Settings, get_settings
from inventory_api.core.exceptions import BaseServiceError, ConflictError, NotFoundError
from inventory_api.core.logging_config import configure_logging
from inventory_api.routes import health, products, stock
from inventory_api.services.product_service import ProductService
from inventory_api.services.stock_service import StockService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {app.title}")
    for route in app.routes:
        if hasattr(route, 'path') and hasattr(route, 'methods'):
            logger.debug(f"Route: {sorted(route.methods)} {route.path}")
    yield
    logger.info(f"Stopping {app.title}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application"""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_TITLE,
        description="In-memory product catalog and stock ledger",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    # One store of each kind per application, shared by every request
    app.state.product_service = ProductService()
    app.state.stock_service = StockService(min_threshold=settings.DEFAULT_MIN_THRESHOLD)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies and path/query params are client errors: 400, not 422
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(BaseServiceError)
    async def service_error_handler(request: Request, exc: BaseServiceError):
        if isinstance(exc, NotFoundError):
            status_code = 404
        elif isinstance(exc, ConflictError):
            status_code = settings.STOCK_CONFLICT_STATUS_CODE
        else:
            status_code = 400
        logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc}")
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    app.include_router(products.router)
    app.include_router(stock.router)
    app.include_router(health.router)

    return app


app = create_app()
