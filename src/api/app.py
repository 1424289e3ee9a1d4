"""Reporting API application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.error import ExceptionMiddleware
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import comissions, customers, transactions
from src.depends import init_db
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)

COMMISSION_FILTER_MODES = ("legacy", "strict")


def check_commission_filter_mode(mode) -> str:
    """Normalise COMMISSION_FILTER_MODE, rejecting unknown values"""
    normalized = str(mode).strip().lower()
    if normalized not in COMMISSION_FILTER_MODES:
        raise ValueError(
            f"COMMISSION_FILTER_MODE must be one of {COMMISSION_FILTER_MODES}, got {mode!r}"
        )
    return normalized


def create_app(config) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        config: ApplicationConfig-like object

    Returns:
        Configured FastAPI instance

    Raises:
        ValueError: COMMISSION_FILTER_MODE is neither "legacy" nor "strict"
    """
    setup_logging(config.LOG_LEVEL)
    filter_mode = check_commission_filter_mode(config.COMMISSION_FILTER_MODE)
    logger.info(f"Commission filter mode: {filter_mode}")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.CREATE_TABLES_ON_STARTUP:
            await init_db()
            logger.info("Database tables ensured")
        yield

    app = FastAPI(
        title="Reporting Service",
        description="Customer, account, transaction and commission reporting API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Last added runs first: CORS -> request logging -> error translation -> routes
    app.add_middleware(ExceptionMiddleware)
    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(customers.router, prefix=config.API_PREFIX)
    app.include_router(transactions.router, prefix=config.API_PREFIX)
    app.include_router(comissions.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
