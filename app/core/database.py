# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진(제한된 크기의 커넥션 풀)을 설정합니다.
- 요청마다 하나의 비동기 세션을 제공하는 의존성 함수를 제공합니다.
- 개발/스크립트 용도로 테이블을 생성하는 함수를 포함합니다 (운영 환경은 Alembic 사용).
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession  # AsyncSession은 비동기용

# 애플리케이션 설정을 임포트합니다.
from app.core.config import settings


# =============================================================================
# 모든 도메인 모델 임포트
# =============================================================================
# SQLModel.metadata가 네 개의 테이블을 모두 인식하도록 명시적으로 임포트합니다.
from app.domains import models  # noqa: F401

logger = logging.getLogger(__name__)


def is_sqlite_url(url: str) -> bool:
    return url.startswith("sqlite")


def enable_sqlite_foreign_keys(sync_engine: Engine) -> None:
    """
    SQLite는 연결마다 외래 키 검사를 켜야 합니다.
    invoices_items 의 참조 무결성 검사가 테스트/로컬 환경에서도 동작하도록 등록합니다.
    """
    @event.listens_for(sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str) -> AsyncEngine:
    """
    설정값으로 비동기 엔진을 생성합니다.
    PostgreSQL 에서는 DB_POOL_MIN 개의 연결을 유지하고 최대 DB_POOL_MAX 개까지 허용합니다.
    """
    engine_kwargs = {
        "echo": settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
        "future": True,
    }
    if not is_sqlite_url(database_url):
        engine_kwargs.update(
            pool_size=settings.DB_POOL_MIN,
            max_overflow=settings.DB_POOL_MAX - settings.DB_POOL_MIN,
            pool_recycle=3600,  # 1시간마다 연결 재활용
            pool_pre_ping=True,
        )

    async_engine = create_async_engine(database_url, **engine_kwargs)
    if is_sqlite_url(database_url):
        enable_sqlite_foreign_keys(async_engine.sync_engine)
    return async_engine


# SQLModel 엔진을 생성합니다.
engine: AsyncEngine = build_engine(settings.DATABASE_URL.get_secret_value())

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
async def create_db_and_tables() -> None:
    """
    데이터베이스 테이블을 생성합니다.
    개발 환경 및 시드 스크립트에서만 사용해야 하며, 기존 테이블을 삭제하지는 않습니다.
    """
    logger.info("Creating database tables (if missing)...")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables are ready.")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    스크립트 등 요청 밖의 비동기 컨텍스트에서 사용할 수 있는
    독립적인 비동기 DB 세션을 제공하는 컨텍스트 관리자입니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
