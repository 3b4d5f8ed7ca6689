"""
Health Check Routes
Service health monitoring endpoints
"""

from fastapi import APIRouter
from datetime import datetime, timezone

from marketplace.utils.dependencies import StoreDep

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check"""
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/health/detailed")
async def detailed_health_check(store: StoreDep):
    """Health check including in-memory record counts"""
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "store": store.stats()
    }
