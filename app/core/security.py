# app/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- 클라이언트 자격 증명(client_id, secret) 검증 정책.
- JWT(JSON Web Token) 생성 및 검증.
- Bearer 토큰을 요구하는 요청 게이트(get_current_client).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Protocol

from jose import jwt, JWTError
from passlib.context import CryptContext  # 비밀번호(secret) 해싱을 위한 라이브러리
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import settings  # 애플리케이션 설정

logger = logging.getLogger(__name__)


# --- secret 해싱 설정 ---
# bcrypt 해싱 알고리즘을 사용합니다.
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    일반 텍스트 secret 과 해싱된 secret 을 비교하여 일치하는지 확인합니다.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    주어진 secret 을 해싱합니다. (AUTH_CLIENTS 설정값 생성용)
    """
    return pwd_context.hash(password)


# =============================================================================
# 1. 클라이언트 자격 증명 검증 정책
# =============================================================================
class CredentialValidator(Protocol):
    def validate(self, client_id: str, secret: str) -> bool:
        ...


class NonEmptyCredentialValidator:
    """
    임시(placeholder) 정책: client_id 와 secret 이 모두 비어 있지 않으면 허용합니다.
    실제 운영 환경에서는 AUTH_CLIENTS 를 설정하여 RegisteredClientValidator 를 사용해야 합니다.
    """

    def validate(self, client_id: str, secret: str) -> bool:
        return bool(client_id) and bool(secret)


class RegisteredClientValidator:
    """
    등록된 클라이언트 목록(client_id -> bcrypt 해시)에 대해 secret 을 검증합니다.
    """

    def __init__(self, clients: Dict[str, str]):
        self.clients = clients

    def validate(self, client_id: str, secret: str) -> bool:
        if not client_id or not secret:
            return False
        hashed = self.clients.get(client_id)
        if hashed is None:
            return False
        return verify_password(secret, hashed)


def get_credential_validator() -> CredentialValidator:
    """
    설정에 등록된 클라이언트가 있으면 해시 검증을, 없으면 임시 정책을 사용합니다.
    """
    if settings.AUTH_CLIENTS:
        return RegisteredClientValidator(settings.AUTH_CLIENTS)
    return NonEmptyCredentialValidator()


# =============================================================================
# 2. JWT 토큰 생성 및 검증
# =============================================================================
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Access Token을 생성합니다.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        # 설정 파일에서 ACCESS_TOKEN_EXPIRE_MINUTES(기본 24시간)를 사용합니다.
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)
    logger.debug("Access token created for sub=%s, expires at %s", data.get("sub"), expire)
    return encoded_jwt


def decode_access_token(token: str) -> dict:
    """
    토큰의 서명과 만료 시간을 검증하고 payload 를 반환합니다.
    검증에 실패하면 JWTError 가 발생합니다.
    """
    return jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])


# =============================================================================
# 3. Bearer 토큰 요청 게이트
# =============================================================================
# auto_error=False: 헤더가 없을 때의 응답(401)을 직접 구성합니다.
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_client(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Authorization: Bearer <token> 헤더를 검증하고 토큰의 subject(client_id)를 반환합니다.
    /authorize 를 제외한 모든 라우트에 적용됩니다.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as e:
        logger.warning("Rejected bearer token: %s", e)
        raise credentials_exception

    client_id: Optional[str] = payload.get("sub")
    if not client_id:
        raise credentials_exception
    return client_id
