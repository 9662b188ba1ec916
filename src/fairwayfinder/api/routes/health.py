"""Liveness endpoint for the tee-time API."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Report that the tee-time service is up. Does not touch the catalog or providers."""
    return {"status": "ok"}
