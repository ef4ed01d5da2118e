import os
from datetime import datetime, timezone

from fastapi import APIRouter, status

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK, summary="Health check")
def health() -> dict[str, str | None]:
    return {
        "message": "Task Management API is running!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": os.getenv("APP_ENV"),
    }
