# tests/conftest.py

import os
import base64
from typing import AsyncGenerator

# --- 테스트 환경 변수 설정 ---
# app.core.config.settings 는 임포트 시점에 생성되므로, 앱을 임포트하기 전에 설정해야 합니다.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-for-inventory-service"
os.environ["AUTH_CLIENTS"] = "{}"
os.environ["APP_ENV"] = "testing"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app  # noqa: E402
from app.core.database import enable_sqlite_foreign_keys, get_session  # noqa: E402

# --- 모든 모델 임포트 ---
# SQLModel.metadata.create_all()이 네 개의 테이블을 모두 인식하도록 합니다.
from app.domains.models import *  # noqa: F401, F403, E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_CLIENT_ID = "abc"
TEST_CLIENT_SECRET = "def"


def basic_auth_header(client_id: str, secret: str) -> str:
    """Authorization: Basic 헤더 값을 만듭니다."""
    encoded = base64.b64encode(f"{client_id}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 새로운 인메모리 SQLite 데이터베이스를 만들고 모든 테이블을 생성합니다.
    StaticPool 을 사용하여 모든 세션이 하나의 연결(같은 인메모리 DB)을 공유합니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine.sync_engine)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine: AsyncEngine):
    """테스트용 세션 팩토리 (AsyncSession)"""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """
    저장소(crud)를 직접 호출하는 테스트에서 사용하는 비동기 데이터베이스 세션입니다.
    """
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    인증되지 않은 AsyncClient 를 제공합니다.
    요청마다 테스트 DB 의 새로운 세션이 주입됩니다.
    """
    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    main_app.dependency_overrides[get_session] = override_get_session
    transport = ASGITransport(app=main_app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        main_app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def authorized_client(client: AsyncClient) -> AsyncClient:
    """
    POST /authorize 로 실제 토큰을 발급받아 Bearer 헤더를 설정한 클라이언트를 반환합니다.
    """
    response = await client.post(
        "/authorize",
        headers={"Authorization": basic_auth_header(TEST_CLIENT_ID, TEST_CLIENT_SECRET)},
    )
    assert response.status_code == 201, response.text
    token = response.json()["token"]
    client.headers["Authorization"] = f"Bearer {token}"
    return client
