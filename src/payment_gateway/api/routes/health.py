"""Operational endpoints."""

from fastapi import APIRouter

from payment_gateway import __version__
from payment_gateway.config import settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
    }


@router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": "Payment Gateway",
        "version": __version__,
        "status": "running",
    }
