# app/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 데이터베이스 모듈 임포트
from app.core.config import settings
from app.core.database import engine, get_session
from app.core.exception_handlers import register_exception_handlers
from app.core import dependencies as deps

# 각 도메인의 라우터들을 임포트합니다.
from app.domains.auth.routers import router as auth_router
from app.domains.items.routers import router as items_router
from app.domains.persons.routers import router as persons_router
from app.domains.invoices.routers import router as invoices_router
from app.domains.invoices_items.routers import router as invoices_items_router

# -- 로깅 설정 --
# 애플리케이션 전체에서 logging.getLogger(__name__) 로 얻은 로거가 이 설정을 따릅니다.
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트를 처리합니다.
    종료 시 데이터베이스 커넥션 풀을 정리합니다.
    """
    logger.info("%s %s 시작 중... (env=%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    logger.info("데이터베이스 스키마는 Alembic 으로 관리됩니다.")

    yield  # 애플리케이션 실행

    logger.info("%s 종료 중...", settings.APP_NAME)
    await engine.dispose()
    logger.info("데이터베이스 연결 풀 종료 완료.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI (Interactive API documentation)
    redoc_url="/redoc",     # ReDoc (Alternative API documentation)
    lifespan=lifespan
)

# -- CORS (Cross-Origin Resource Sharing) 미들웨어 설정 --
# 운영 환경에서는 CORS_ORIGINS 를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 전역 예외 핸들러 (DB 제약 조건 위반 -> 409, 연결 실패 -> 503) --
register_exception_handlers(app)

# -- 도메인 라우터 포함 --
# /authorize 를 제외한 모든 라우터는 Bearer 토큰 게이트(get_current_client)를 거칩니다.
protected = [Depends(deps.get_current_client)]

app.include_router(auth_router)
app.include_router(items_router, prefix="/items", dependencies=protected)
app.include_router(persons_router, prefix="/persons", dependencies=protected)
app.include_router(invoices_router, prefix="/invoices", dependencies=protected)
app.include_router(invoices_items_router, prefix="/invoices-items", dependencies=protected)


# -- 루트 엔드포인트 --
@app.get(
    "/",
    summary="API Root",
    response_description="Welcome message and documentation link.",
    dependencies=protected,
)
async def read_root():
    """
    API의 루트 엔드포인트입니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
# 데이터베이스에 연결할 수 없으면 OperationalError 가 전역 핸들러에 의해 503 으로 변환됩니다.
@app.get(
    "/health-check",
    summary="Health Check",
    response_description="Status of the application and database connection.",
    dependencies=protected,
)
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스에 가벼운 쿼리(select 1)를 실행하여 연결 상태를 확인합니다.
    """
    result = await session.exec(select(1))
    result.first()
    return {"status": "ok", "database_connection": "successful"}


# -- Uvicorn 서버 직접 실행 (개발용) --
# if __name__ == "__main__":
#     import uvicorn
#     uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
