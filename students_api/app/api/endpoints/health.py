"""
Liveness endpoint.

``GET /health`` answers as long as the process is serving requests.
It does not touch the database.
"""

from typing import Dict

from fastapi import APIRouter, status

router = APIRouter()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health() -> Dict[str, str]:
    return {"status": "healthy"}
