from fastapi import APIRouter, Depends

from inventory_api.core.config import Settings
from inventory_api.dependencies import get_app_settings

router = APIRouter(tags=["health"])

@router.get("/health")
def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic health check"""
    return {
        "status": "healthy",
        "service": settings.APP_TITLE,
        "environment": settings.ENVIRONMENT
    }
