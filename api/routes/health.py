"""
Health check endpoints.
"""
from datetime import datetime, timezone
import platform

from fastapi import APIRouter, Depends

from api.dependencies import get_amazon_pa_credentials
from core.settings import AmazonPaApiCredentials


router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "paapi-node",
        "version": "1.0.0",
        "python_version": platform.python_version(),
    }


@router.get("/health/ready")
async def readiness_check(
    credentials: AmazonPaApiCredentials = Depends(get_amazon_pa_credentials),
):
    """
    Readiness check endpoint.

    Ready once access key and secret key are configured.
    """
    checks = {
        "access_key": bool(credentials.access_key),
        "secret_key": bool(credentials.secret_key),
        "partner_tag": bool(credentials.partner_tag),
    }
    ready = checks["access_key"] and checks["secret_key"]
    return {
        "status": "ready" if ready else "not_ready",
        "marketplace": credentials.marketplace.value,
        "checks": checks,
    }
