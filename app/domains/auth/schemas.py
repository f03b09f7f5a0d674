# app/domains/auth/schemas.py

"""
'auth' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from pydantic import BaseModel


# =============================================================================
# 인증 토큰 (Token) 스키마
# =============================================================================
class TokenResponse(BaseModel):
    """POST /authorize 응답 스키마"""
    token: str
