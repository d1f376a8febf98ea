"""
Health Check Endpoints

- /health       - liveness (app is running)
- /health/ready - readiness (the entity store answers a query)
- /info         - service metadata
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from datetime import datetime
from typing import Any, Dict
import time

from app.core.config import settings
from app.core.logging_config import logger
from app.models.kinds import EntityKind
from app.modules.storage import EntityStore, get_store

router = APIRouter(tags=["Health Checks"])


async def check_store(store: EntityStore) -> Dict[str, Any]:
    """Check the entity store can serve a read"""
    start = time.time()
    try:
        resources = await store.count(EntityKind.RESOURCE)
        latency = (time.time() - start) * 1000
        return {
            "status": "healthy",
            "backend": settings.STORAGE_BACKEND,
            "latency_ms": round(latency, 2),
            "resources": resources,
        }
    except Exception as e:
        latency = (time.time() - start) * 1000
        logger.error(f"[HealthCheck] Store check failed: {e}")
        return {
            "status": "unhealthy",
            "backend": settings.STORAGE_BACKEND,
            "latency_ms": round(latency, 2),
            "error": str(e),
        }


@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": "launchpad-backend"}


@router.get("/health/ready")
async def readiness_check(store: EntityStore = Depends(get_store)):
    """Readiness probe - 503 when the store is unavailable"""
    store_check = await check_store(store)
    healthy = store_check["status"] == "healthy"
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if healthy else "not_ready",
            "timestamp": datetime.utcnow().isoformat(),
            "checks": {"store": store_check},
        },
    )


@router.get("/info")
async def service_info():
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "storage_backend": settings.STORAGE_BACKEND,
        "ai_enabled": bool(settings.ANTHROPIC_API_KEY),
    }
