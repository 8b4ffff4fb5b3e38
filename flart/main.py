from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flart.core.config import get_setting
from flart.core.exception.exceptions import ServiceException
from flart.core.log.logging import get_logging
from flart.figma2dart.web.router import router

settings = get_setting()

logger = get_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"{settings.APP_NAME} 시작 (environment: {settings.ENVIRONMENT})")
    try:
        yield
    finally:
        logger.info(f"{settings.APP_NAME} 종료")


app = FastAPI(
    title="Flart",
    description="Figma design tokens to Flutter/Dart source",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS 미들웨어 추가 (Figma 플러그인 UI 에서 호출)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceException)
async def service_exception_handler(
    request: Request, exc: ServiceException
) -> JSONResponse:
    logger.error(f"요청 처리 실패 [{exc.error_code.name}]: {exc.message}")
    return JSONResponse(
        status_code=400,
        content={"code": exc.error_code.name, "message": exc.message},
    )


# 라우터 등록
app.include_router(router)


def run() -> None:
    import uvicorn

    uvicorn.run(
        app,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        access_log=False,
    )


if __name__ == "__main__":
    run()
