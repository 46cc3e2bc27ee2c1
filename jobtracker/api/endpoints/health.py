"""
Health check endpoint.
"""

from typing import Dict

from fastapi import APIRouter, status

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running. No authentication required.
    """
    return {"status": "healthy"}
