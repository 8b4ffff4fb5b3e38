from datetime import datetime

from fastapi import APIRouter

from flart.core.config import get_setting

settings = get_setting()

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "timestamp": datetime.now().isoformat(),
    }
