"""
Health API Routes
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from subscriptions_api.config import settings
from subscriptions_api.database import check_database_connection, database_health

router = APIRouter()


@router.get("/health")
def health_check() -> JSONResponse:
    """Application and database health"""
    db = database_health()
    ok = bool(db.get("ok")) and check_database_connection()
    return JSONResponse(
        status_code=status.HTTP_200_OK if ok else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if ok else "degraded",
            "version": settings.app_version,
            "environment": settings.app_env,
            "database": db,
        },
    )
