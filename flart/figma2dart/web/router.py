from fastapi import APIRouter

from flart.figma2dart.generate_code.controller.generate_code_controller import (
    router as generate_code_router,
)
from flart.figma2dart.web.health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(generate_code_router)
