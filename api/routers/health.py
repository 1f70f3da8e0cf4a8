"""
Health check endpoint.

This is the first thing you hit to verify the service is running.
The service keeps no state and talks to no backing store, so answering
at all means it's healthy.
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}
