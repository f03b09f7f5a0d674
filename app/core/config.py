# app/core/config.py

from typing import Any, Dict, List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Inventory Service API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "API documentation for the Inventory Service"
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드 활성화 여부 (SQL 쿼리 출력)
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for SQL echo and detailed error messages")
    LOG_LEVEL: str = Field("INFO", description="Root logging level (DEBUG, INFO, WARNING, ...)")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Database connection URL (postgresql+asyncpg://...)")
    # 커넥션 풀 크기 (최소/최대). SQLite URL에서는 사용되지 않습니다.
    DB_POOL_MIN: int = Field(2, ge=1, description="Number of connections kept open in the pool")
    DB_POOL_MAX: int = Field(10, ge=1, description="Upper bound of pooled connections")

    # --- JWT (JSON Web Token) 설정 ---
    SECRET_KEY: SecretStr = Field(..., description="Secret key for JWT token signing. Keep this highly secure!")
    ALGORITHM: str = Field("HS256", description="Algorithm used for JWT signing (e.g., HS256)")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24, description="Access token expiration time in minutes (24h)")

    # --- 클라이언트 자격 증명 ---
    # client_id -> bcrypt 해시. 비어 있으면 "빈 값이 아닌 모든 쌍 허용" 정책이 적용됩니다.
    AUTH_CLIENTS: Dict[str, str] = Field(default_factory=dict, description="Registered API clients (client_id -> bcrypt hash)")

    # --- CORS 설정 ---
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    # Post-initialization validation (Pydantic v2 BaseSettings)
    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 최대 풀 크기가 최소 풀 크기보다 작으면 최소값에 맞춥니다.
        if self.DB_POOL_MAX < self.DB_POOL_MIN:
            self.DB_POOL_MAX = self.DB_POOL_MIN


settings = Settings()
