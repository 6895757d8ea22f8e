from datetime import datetime, timezone

from fastapi import APIRouter

from src.config.config import config

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health():
    """Basic health check endpoint. Reports whether an API key is configured, never the key."""

    return {
        "message": "City Weather API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": "1.0.0",
        "api_key_configured": config.has_api_key,
    }
