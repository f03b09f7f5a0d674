# app/domains/auth/services.py

"""
Basic 자격 증명으로 Bearer 토큰을 발급하는 서비스 모듈입니다.

Authorization 헤더 형식: 'Basic ' + base64("client_id:secret")
자격 증명의 검증 정책은 CredentialValidator 로 분리되어 있습니다.
"""

import base64
import binascii
import logging
from typing import Optional, Tuple

from fastapi import Depends, HTTPException, status
from fastapi.security.utils import get_authorization_scheme_param

from app.core.security import CredentialValidator, create_access_token, get_credential_validator

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def parse_basic_authorization(authorization: Optional[str]) -> Tuple[str, str]:
    """
    Authorization 헤더에서 (client_id, secret) 쌍을 추출합니다.
    secret 에는 ':' 가 포함될 수 있으므로 첫 번째 ':' 에서만 나눕니다.
    """
    if not authorization:
        raise _unauthorized("Authorization header is missing")

    scheme, encoded = get_authorization_scheme_param(authorization)
    if scheme != "Basic":
        raise _unauthorized("Basic authentication is required")

    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        raise _unauthorized("Invalid authorization header")

    client_id, separator, secret = decoded.partition(":")
    if not separator:
        raise _unauthorized("Invalid authorization header")
    return client_id, secret


class AuthService:
    def __init__(self, validator: CredentialValidator):
        self.validator = validator

    def issue_token(self, authorization: Optional[str]) -> str:
        """
        자격 증명을 검증하고 subject 가 client_id 인 토큰을 발급합니다.
        """
        client_id, secret = parse_basic_authorization(authorization)
        if not self.validator.validate(client_id, secret):
            logger.warning("Token request rejected for client_id=%r", client_id)
            raise _unauthorized("Invalid credentials")

        token = create_access_token(data={"sub": client_id})
        logger.info("Token issued for client_id=%s", client_id)
        return token


def get_auth_service(validator: CredentialValidator = Depends(get_credential_validator)) -> AuthService:
    return AuthService(validator)
