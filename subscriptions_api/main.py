"""
Subscription Service - FastAPI Application
CRUD over subscription records plus date-range cost aggregation
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from subscriptions_api.api.routes import health
from subscriptions_api.api.v1 import costs, subscriptions
from subscriptions_api.config import settings
from subscriptions_api.core.error_handlers import register_error_handlers
from subscriptions_api.core.logging import setup_logging
from subscriptions_api.database import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} v{settings.app_version} ({settings.app_env})")

    try:
        init_db()
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        raise
    logger.info("Database initialized")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    description="Subscription records and date-range cost aggregation",
    version=settings.app_version,
    debug=settings.app_debug,
    lifespan=lifespan,
    docs_url="/swagger",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


app.include_router(health.router, prefix=settings.api_v1_prefix, tags=["Health"])
app.include_router(
    subscriptions.router,
    prefix=f"{settings.api_v1_prefix}/subscriptions",
    tags=["Subscriptions"],
)
app.include_router(costs.router, prefix=settings.api_v1_prefix, tags=["Cost"])
