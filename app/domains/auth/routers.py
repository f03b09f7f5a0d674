# app/domains/auth/routers.py

"""
'auth' 도메인 (토큰 발급)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
이 라우터는 Bearer 토큰 게이트에서 제외됩니다.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Header, status

from . import schemas as auth_schemas
from .services import AuthService, get_auth_service

# APIRouter 인스턴스 생성
router = APIRouter(
    tags=["Authorization (인증)"],
    responses={401: {"description": "Unauthorized"}},
)


@router.post(
    "/authorize",
    response_model=auth_schemas.TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Access Token 발급",
)
async def authorize(
    authorization: Optional[str] = Header(None),
    service: AuthService = Depends(get_auth_service),
):
    """
    `Authorization: Basic base64(client_id:secret)` 헤더를 검증하고 Bearer 토큰을 발급합니다.
    토큰의 subject(sub)는 client_id 이며 24시간 후 만료됩니다.
    """
    return {"token": service.issue_token(authorization)}
