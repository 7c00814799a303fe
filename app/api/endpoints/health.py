"""
Health check endpoints.

Provides liveness and a detailed check that pings MongoDB.
"""

import logging
from typing import Dict, Any
from fastapi import APIRouter, Request, status
from pymongo.errors import PyMongoError
from datetime import datetime, timezone

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    Use this for simple uptime monitoring and load balancer health checks.
    """
    return {
        "status": "healthy",
        "timestamp": _timestamp()
    }


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
def detailed_health_check(request: Request) -> Dict[str, Any]:
    """
    Detailed health check with database status.

    Always returns 200; the overall and per-check status live in the body.
    """
    health_status = {
        "status": "healthy",
        "timestamp": _timestamp(),
        "checks": {}
    }

    client = getattr(request.app.state, "mongo_client", None)

    if client is None:
        logger.error("Database health check failed: no database client")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": "Database client not initialized"
        }
        return health_status

    try:
        client.admin.command("ping")
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful"
        }
    except PyMongoError as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": f"Database error: {str(e)}"
        }

    return health_status
